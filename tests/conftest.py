"""Shared fixtures: canned GitHub payloads, a fake HTTP session, and an
executor that only runs submitted work when the test says so."""

import json
from concurrent.futures import Executor, Future
from unittest.mock import MagicMock

import cv2
import numpy as np
import pytest
import requests

from profile_viewer.config import Settings
from profile_viewer.github_client import GitHubClient

OCTOCAT = {
    "login": "octocat",
    "name": "The Octocat",
    "bio": None,
    "public_repos": 8,
    "followers": 9999,
    "following": 9,
    "html_url": "https://github.com/octocat",
    "avatar_url": "https://avatars/octocat.png",
}

PROFILE_URL = "https://api.github.com/users/octocat"
AVATAR_URL = OCTOCAT["avatar_url"]


def png_bytes(width: int = 4, height: int = 4) -> bytes:
    ok, buf = cv2.imencode(".png", np.zeros((height, width, 3), dtype=np.uint8))
    assert ok
    return buf.tobytes()


def make_response(content: bytes, status_code: int = 200) -> MagicMock:
    resp = MagicMock(spec=requests.Response)
    resp.content = content
    resp.status_code = status_code
    return resp


def json_response(payload, status_code: int = 200) -> MagicMock:
    return make_response(json.dumps(payload).encode("utf-8"), status_code)


class ManualExecutor(Executor):
    """Holds submitted callables until ``run_next``/``run_all`` is called."""

    def __init__(self):
        self.tasks = []

    def submit(self, fn, *args, **kwargs):
        future = Future()
        self.tasks.append((future, fn, args, kwargs))
        return future

    def run_next(self, index: int = 0) -> None:
        future, fn, args, kwargs = self.tasks.pop(index)
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)

    def run_all(self) -> None:
        while self.tasks:
            self.run_next()


def settle(search, executor: ManualExecutor) -> None:
    """Alternate worker and UI steps until nothing is left to do."""
    while executor.tasks or search.busy:
        executor.run_all()
        search.process_completions()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def session():
    sess = MagicMock(spec=requests.Session)
    sess.headers = {}
    return sess


@pytest.fixture
def client(settings, session):
    return GitHubClient(settings=settings, session=session)


@pytest.fixture
def executor():
    return ManualExecutor()
