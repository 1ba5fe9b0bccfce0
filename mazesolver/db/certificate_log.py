"""Append-only log of race completion certificates."""

from __future__ import annotations

from pathlib import Path

from mazesolver.api.contracts import Certificate

CERTIFICATE_LOG_NAME = "completion-certs.txt"


def append_certificate(path: Path, certificate: Certificate, url: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(f"{certificate.completed} - {certificate.elapsed}:\n")
        handle.write(f"{url}\n")
