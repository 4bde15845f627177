"""Integration tests for the spec command."""

import tomllib
from collections.abc import Callable
from pathlib import Path

import orjson
import pytest
import yaml

from pulsar_operator.cli._commands._shared import ExitCode

CLUSTER_RESOURCE = """\
apiVersion: pulsar.oss.datastax.com/v1alpha1
kind: PulsarCluster
metadata:
  name: pulsar
spec:
  global:
    name: pulsar
    persistence: false
    storage:
      storageClass:
        provisioner: kubernetes.io/gce-pd
"""


@pytest.fixture
def cluster_file(tmp_path: Path) -> Path:
    path = tmp_path / "cluster.yaml"
    _ = path.write_text(CLUSTER_RESOURCE)
    return path


class TestDefaultsCommand:
    def test_empty_spec_yaml(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = pulsar_cli_with_exit_code("spec", "defaults")

        assert exit_code == ExitCode.SUCCESS
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["kubernetesClusterDomain"] == "cluster.local"
        assert data["imagePullPolicy"] == "IfNotPresent"
        assert data["persistence"] is True
        assert data["components"]["functionsWorkerBaseName"] == "function"
        assert data["storage"] == {"existingStorageClassName": "default"}
        assert data["tls"] == {"enabled": False, "defaultSecretName": "pulsar-tls"}

    def test_file_values_are_kept(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
        cluster_file: Path,
    ) -> None:
        exit_code = pulsar_cli_with_exit_code(
            "spec", "defaults", str(cluster_file), "--format", "json"
        )

        assert exit_code == ExitCode.SUCCESS
        data = orjson.loads(capsys.readouterr().out)
        assert data["name"] == "pulsar"
        assert data["persistence"] is False
        assert data["storage"] == {
            "storageClass": {
                "reclaimPolicy": "Retain",
                "provisioner": "kubernetes.io/gce-pd",
            }
        }

    def test_toml_output(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = pulsar_cli_with_exit_code("spec", "defaults", "-f", "toml")

        assert exit_code == ExitCode.SUCCESS
        data = tomllib.loads(capsys.readouterr().out)
        assert data["auth"]["token"]["proxyRoles"] == ["proxy"]

    def test_explain_lists_defaulted_paths_on_stderr(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
        cluster_file: Path,
    ) -> None:
        exit_code = pulsar_cli_with_exit_code(
            "spec", "defaults", str(cluster_file), "--explain"
        )

        assert exit_code == ExitCode.SUCCESS
        err = capsys.readouterr().err
        assert "defaulted: kubernetesClusterDomain" in err
        assert "defaulted: storage.storageClass.reclaimPolicy" in err
        assert "defaulted: persistence" not in err

    def test_missing_file(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
    ) -> None:
        exit_code = pulsar_cli_with_exit_code(
            "spec", "defaults", str(tmp_path / "missing.yaml")
        )

        assert exit_code == ExitCode.NOT_FOUND
        assert "Spec file not found" in capsys.readouterr().out

    def test_unparsable_file(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
    ) -> None:
        path = tmp_path / "broken.yaml"
        _ = path.write_text("tls: [unclosed\n")

        assert pulsar_cli_with_exit_code("spec", "defaults", str(path)) == (
            ExitCode.LOAD_ERROR
        )

    def test_invalid_value(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
    ) -> None:
        path = tmp_path / "invalid.yaml"
        _ = path.write_text("persistence: maybe\n")

        exit_code = pulsar_cli_with_exit_code("spec", "defaults", str(path))

        assert exit_code == ExitCode.VALIDATION_ERROR
        assert "'persistence'" in capsys.readouterr().out


class TestValidateCommand:
    def test_valid_file(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
        cluster_file: Path,
    ) -> None:
        exit_code = pulsar_cli_with_exit_code("spec", "validate", str(cluster_file))

        assert exit_code == ExitCode.SUCCESS
        assert capsys.readouterr().out.strip() == f"{cluster_file}: valid"

    def test_reports_every_bad_field(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
    ) -> None:
        path = tmp_path / "invalid.yaml"
        _ = path.write_text("persistence: maybe\nimagePullPolicy: Sometimes\n")

        exit_code = pulsar_cli_with_exit_code(
            "spec", "validate", str(path), "--format", "json"
        )

        assert exit_code == ExitCode.VALIDATION_ERROR
        data = orjson.loads(capsys.readouterr().out)
        assert data["valid"] is False
        assert data["source"] == str(path)
        assert {issue["key"] for issue in data["issues"]} == {
            "persistence",
            "imagePullPolicy",
        }

    def test_text_output_counts_issues(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
    ) -> None:
        path = tmp_path / "invalid.yaml"
        _ = path.write_text("tls:\n  enabled: sometimes\n")

        exit_code = pulsar_cli_with_exit_code("spec", "validate", str(path))

        assert exit_code == ExitCode.VALIDATION_ERROR
        out = capsys.readouterr().out
        assert f"{path}: 1 issue(s)" in out
        assert "error: tls.enabled:" in out

    def test_missing_file(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
    ) -> None:
        exit_code = pulsar_cli_with_exit_code(
            "spec", "validate", str(tmp_path / "missing.yaml")
        )

        assert exit_code == ExitCode.NOT_FOUND


class TestSchemaCommand:
    def test_json_schema_uses_wire_names(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = pulsar_cli_with_exit_code("spec", "schema")

        assert exit_code == ExitCode.SUCCESS
        schema = orjson.loads(capsys.readouterr().out)
        assert "restartOnConfigMapChange" in schema["properties"]

    def test_yaml_schema(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = pulsar_cli_with_exit_code("spec", "schema", "--format", "yaml")

        assert exit_code == ExitCode.SUCCESS
        assert "kubernetesClusterDomain" in yaml.safe_load(capsys.readouterr().out)[
            "properties"
        ]

    def test_toml_is_rejected(
        self,
        pulsar_cli_with_exit_code: Callable[..., int],
    ) -> None:
        assert pulsar_cli_with_exit_code("spec", "schema", "-f", "toml") == (
            ExitCode.LOAD_ERROR
        )


class TestGlobalOptions:
    def test_verbose_logs_defaulting_to_stderr(
        self,
        pulsar_meta_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exit_code = pulsar_meta_cli_with_exit_code("--verbose", "spec", "defaults")

        assert exit_code == ExitCode.SUCCESS
        assert "global_spec_defaults_applied" in capsys.readouterr().err

    def test_default_level_hides_debug_events(
        self,
        pulsar_meta_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv("PULSAR_OPERATOR_DEBUG", raising=False)

        exit_code = pulsar_meta_cli_with_exit_code("spec", "defaults")

        assert exit_code == ExitCode.SUCCESS
        assert "global_spec_defaults_applied" not in capsys.readouterr().err

    def test_log_file_option(
        self,
        pulsar_meta_cli_with_exit_code: Callable[..., int],
        tmp_path: Path,
    ) -> None:
        log_file = tmp_path / "logs" / "cli.log"

        exit_code = pulsar_meta_cli_with_exit_code(
            "--log-level",
            "debug",
            "--log-format",
            "json",
            "--log-file",
            str(log_file),
            "spec",
            "defaults",
        )

        assert exit_code == ExitCode.SUCCESS
        assert '"event": "global_spec_defaults_applied"' in log_file.read_text()

    def test_quiet_overrides_log_level(
        self,
        pulsar_meta_cli_with_exit_code: Callable[..., int],
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv("PULSAR_OPERATOR_DEBUG", raising=False)

        exit_code = pulsar_meta_cli_with_exit_code(
            "--quiet", "--log-level", "debug", "spec", "defaults"
        )

        assert exit_code == ExitCode.SUCCESS
        assert "global_spec_defaults_applied" not in capsys.readouterr().err
