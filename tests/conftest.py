from __future__ import annotations

from typing import List

import pytest


@pytest.fixture
def signed_links() -> List[str]:
    """Manifest and signature names every publishable release needs."""
    return ["x_SHA256SUMS", "x_SHA256SUMS.sig"]
