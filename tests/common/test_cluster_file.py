from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from clusterlog.config import ConfigurationError, load_cluster_file
from clusterlog.domain.cluster import ClusterRef

if TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "cluster.yaml"
    path.write_text(content)
    return path


def test_loads_name_region_and_enable_types(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
apiVersion: example.io/v1alpha5
kind: ClusterConfig
metadata:
  name: prod
  region: eu-west-1
cloudWatch:
  clusterLogging:
    enableTypes: ["api", "audit"]
""",
    )

    spec = load_cluster_file(path)

    assert spec.cluster == ClusterRef(name="prod", region="eu-west-1")
    assert spec.enable_types == ("api", "audit")


def test_missing_cloudwatch_section_means_no_types(tmp_path: Path) -> None:
    path = _write(tmp_path, "metadata:\n  name: prod\n  region: eu-west-1\n")

    assert load_cluster_file(path).enable_types == ()


def test_explicit_region_wins(tmp_path: Path) -> None:
    path = _write(tmp_path, "metadata:\n  name: prod\n  region: eu-west-1\n")

    spec = load_cluster_file(path, region="us-west-2")

    assert spec.cluster.region == "us-west-2"


def test_region_is_required(tmp_path: Path) -> None:
    path = _write(tmp_path, "metadata:\n  name: prod\n")

    with pytest.raises(ConfigurationError, match="No region"):
        load_cluster_file(path)


@pytest.mark.parametrize(
    "content",
    [
        "metadata: [unclosed",
        "kind: ClusterConfig\n",
        "metadata:\n  name: ''\n  region: eu-west-1\n",
    ],
)
def test_invalid_files_raise_configuration_error(tmp_path: Path, content: str) -> None:
    with pytest.raises(ConfigurationError):
        load_cluster_file(_write(tmp_path, content))


def test_missing_file_raises_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Cannot read"):
        load_cluster_file(tmp_path / "absent.yaml")
