# -*- coding: utf-8 -*-

import os

import requests

import restpager as rp


TOKEN = os.getenv("GITHUB_TOKEN", "*****")

if __name__ == "__main__":
    # HTTPClient: tüm sayfalar tek bir listede
    with rp.HTTPClient(
        base_url="https://api.github.com",
        headers={"Authorization": f"Bearer {TOKEN}"},
        timeout=30,
    ) as client:
        issues = client.get("repos/python/cpython/issues", params={"state": "open"})
        print(len(issues))

        # Arama sonuçlarında items birleştirilir, total_count son sayfadan gelir
        result = client.get("search/issues", params={"q": "repo:python/cpython label:docs"})
        print(result["total_count"], len(result["items"]))

    # Mevcut bir Session'ı sarmak
    session = rp.wrap_session(requests.Session(), rp.PaginationConfig(max_pages=20))
    response = session.get("https://api.github.com/orgs/python/repos")
    print(response.headers["Content-Length"], len(response.json()))
