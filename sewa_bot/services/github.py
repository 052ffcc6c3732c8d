# sewa_bot/services/github.py
from __future__ import annotations

import base64
import logging
from typing import Any, Dict, Optional, Tuple, Union
from urllib.parse import quote

import requests

GITHUB_API_BASE = "https://api.github.com"
RAW_MEDIA_TYPE = "application/vnd.github.raw+json"


class ContentStoreError(RuntimeError):
    """The GitHub contents API answered with an error other than 404."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class StaleVersionError(ContentStoreError):
    """A write carried a sha that no longer matches the file on the branch."""


class ContentStore:
    """
    Thin client for the GitHub contents API of the website repository.

    Files are addressed by path on one owner/repo/branch. Every update is
    conditioned on the blob sha of the version that was read, so GitHub
    rejects writes based on a stale read instead of overwriting.
    """

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        branch: str = "main",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self.owner = owner
        self.repo = repo
        self.branch = branch
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        })

    @classmethod
    def from_settings(cls, settings) -> "ContentStore":
        return cls(
            token=settings.github_token,
            owner=settings.github_owner,
            repo=settings.github_repo,
            branch=settings.github_branch,
            timeout=settings.http_timeout,
        )

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def _contents_url(self, path: str) -> str:
        return f"{GITHUB_API_BASE}/repos/{self.owner}/{self.repo}/contents/{quote(path.lstrip('/'), safe='/')}"

    def _raise_for(self, response: requests.Response, action: str, path: str) -> None:
        try:
            detail = response.json().get("message", "")
        except ValueError:
            detail = response.text
        message = f"GitHub {action} {path} failed ({response.status_code}): {detail}"

        if response.status_code == 409 or (
            response.status_code == 422 and "sha" in (detail or "").lower()
        ):
            raise StaleVersionError(message, response.status_code)
        raise ContentStoreError(message, response.status_code)

    def _get_contents(self, path: str) -> Optional[Dict[str, Any]]:
        response = self.session.get(
            self._contents_url(path),
            params={"ref": self.branch},
            timeout=self.timeout,
        )
        if response.status_code == 404:
            return None
        if response.status_code != 200:
            self._raise_for(response, "read", path)
        return response.json()

    def _get_raw(self, path: str) -> bytes:
        response = self.session.get(
            self._contents_url(path),
            params={"ref": self.branch},
            headers={"Accept": RAW_MEDIA_TYPE},
            timeout=self.timeout,
        )
        if response.status_code != 200:
            self._raise_for(response, "raw read", path)
        return response.content

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #
    def read(self, path: str) -> Tuple[Optional[str], Optional[str]]:
        """
        Fetch a text file and its version token.

        Returns:
            (content, sha), or (None, None) if the file does not exist.
        """
        data = self._get_contents(path)
        if data is None:
            logging.info("[GITHUB] %s does not exist yet", path)
            return None, None

        if data.get("encoding") == "base64":
            raw = base64.b64decode(data.get("content") or "")
        else:
            # Files over 1 MB come back with encoding "none" and no content.
            raw = self._get_raw(path)
        return raw.decode("utf-8"), data.get("sha")

    def get_version(self, path: str) -> Optional[str]:
        """Current sha of a file, or None if it does not exist."""
        data = self._get_contents(path)
        return data.get("sha") if data else None

    def get_repository(self) -> Dict[str, Any]:
        """Repository metadata (full_name, updated_at, …)."""
        response = self.session.get(
            f"{GITHUB_API_BASE}/repos/{self.owner}/{self.repo}",
            timeout=self.timeout,
        )
        if response.status_code != 200:
            self._raise_for(response, "repo info", self.full_name)
        return response.json()

    # ------------------------------------------------------------------ #
    # Writes
    # ------------------------------------------------------------------ #
    def write(
        self,
        path: str,
        content: Union[str, bytes],
        message: str,
        sha: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create `path` (no sha) or update it (sha of the version that was read).

        Returns:
            The commit payload GitHub returns.

        Raises:
            StaleVersionError: the sha is stale, or missing for an existing file.
            ContentStoreError: any other API failure.
        """
        raw = content.encode("utf-8") if isinstance(content, str) else content
        payload: Dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(raw).decode("ascii"),
            "branch": self.branch,
        }
        if sha:
            payload["sha"] = sha

        response = self.session.put(
            self._contents_url(path),
            json=payload,
            timeout=self.timeout,
        )
        if response.status_code not in (200, 201):
            self._raise_for(response, "write", path)

        logging.info("[GITHUB] committed %s (%s)", path, message)
        return response.json()

    def upload_media(
        self,
        path: str,
        data: bytes,
        message: str,
        overwrite: bool = False,
    ) -> str:
        """
        Commit a binary blob and return its repository path.

        Image paths are unique per upload, so no version is sent. With
        `overwrite`, the current sha is looked up first so that a file of
        the same name is replaced.
        """
        sha = self.get_version(path) if overwrite else None
        self.write(path, data, message, sha=sha)
        return path
