"""Canned GitLab responses and a replaying transport for the tests."""

import json

from git_mirror.core.transport import PageResponse


class FakeTransport:
    """Replays canned responses and records the requested URLs."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.urls = []
        self.closed = False

    def get(self, url):
        self.urls.append(url)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


def make_project(name, description="", **overrides):
    project = {
        "id": 1,
        "name": name,
        "description": description,
        "web_url": f"https://gitlab.example.com/mirrors/{name}",
        "ssh_url_to_repo": f"git@gitlab.example.com:mirrors/{name}.git",
        "http_url_to_repo": f"https://gitlab.example.com/mirrors/{name}.git",
    }
    project.update(overrides)
    return project


def make_page(projects, next_page=None, status=200):
    headers = {"Content-Type": "application/json"}
    if next_page is not None:
        headers["X-Next-Page"] = str(next_page)
    return PageResponse(status=status, headers=headers, body=json.dumps(projects).encode())
