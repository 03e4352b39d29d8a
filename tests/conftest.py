"""Shared test fixtures for the supergroup directory tests."""

import pytest

SAMPLE_TABLE = r"""# Supergroups

Exported from the wiki.

| [Name](http://wiki/name) | Org | Mission | Goals | Groups | Subgroups | Teams | About Us URL |
|---|---|---|---|---|---|---|---|
| [Zeta Works](https://z.example/) | [Zeta Org](https://org.z) | Build \*things\* | Build tools for teams Grow the community | [G1](https://g1) [G2](https://g2) | - | \- | [About](https://z.example/about/) |
| Alpha Guild | Independent | - | - | | | [T1](https://t1) | - |

Last edited by the directory team.
"""

SAMPLE_VISIONS = "name,vision\nZeta Works,See further\nUnknown Group,Never used\n"


@pytest.fixture
def data_dir(tmp_path):
    """Data directory holding only the sample markdown table."""
    directory = tmp_path / "data"
    directory.mkdir()
    (directory / "supergroups.md").write_text(SAMPLE_TABLE, encoding="utf-8")
    return directory


@pytest.fixture
def data_dir_with_csv(data_dir):
    """Sample table plus a vision CSV."""
    (data_dir / "supergroups.csv").write_text(SAMPLE_VISIONS, encoding="utf-8")
    return data_dir
