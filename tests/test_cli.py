"""
Tests for CLI commands — analyze, analyzers, and global options.
"""

import json
from pathlib import Path

from click.testing import CliRunner

from meshcheck.main import cli

POD = """\
apiVersion: v1
kind: Pod
metadata:
  name: gw-0
  namespace: ns1
  labels:
    app: gw
"""

GATEWAY = """\
apiVersion: networking.istio.io/v1beta1
kind: Gateway
metadata:
  name: edge
  namespace: apps
spec:
  selector:
    app: {app}
  servers:
    - port:
        number: 443
        protocol: HTTPS
      hosts: ["*"]
      tls:
        mode: SIMPLE
        credentialName: cert-a
"""

SECRET = """\
apiVersion: v1
kind: Secret
metadata:
  name: cert-a
  namespace: ns1
"""


def _write(tmp_path: Path, *docs: str) -> Path:
    path = tmp_path / "mesh.yaml"
    path.write_text("---\n".join(docs))
    return path


class TestCLIGlobal:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "meshcheck" in result.output
        assert "analyze" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestAnalyzeCommand:
    def test_clean(self, tmp_path: Path):
        path = _write(tmp_path, POD, SECRET, GATEWAY.format(app="gw"))
        result = CliRunner().invoke(cli, ["analyze", str(path)])
        assert result.exit_code == 0
        assert "No validation issues found" in result.output

    def test_missing_secret(self, tmp_path: Path):
        path = _write(tmp_path, POD, GATEWAY.format(app="gw"))
        result = CliRunner().invoke(cli, ["analyze", str(path)])
        assert result.exit_code == 1
        assert (
            'Error [IST0101] (Gateway apps/edge) Referenced credentialName not found: "cert-a"'
            in result.output
        )

    def test_unresolved_selector(self, tmp_path: Path):
        path = _write(tmp_path, POD, GATEWAY.format(app="none"))
        result = CliRunner().invoke(cli, ["analyze", str(path)])
        assert result.exit_code == 1
        assert 'Referenced selector not found: "app=none"' in result.output
        assert "credentialName" not in result.output

    def test_json_output(self, tmp_path: Path):
        path = _write(tmp_path, POD, GATEWAY.format(app="gw"))
        result = CliRunner().invoke(cli, ["analyze", "--json", str(path)])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["issues"][0]["value"] == "cert-a"

    def test_suppress_option(self, tmp_path: Path):
        path = _write(tmp_path, POD, GATEWAY.format(app="gw"))
        result = CliRunner().invoke(
            cli, ["analyze", "--suppress", "IST0101=Gateway apps/*", str(path)],
        )
        assert result.exit_code == 0
        assert "1 suppressed" in result.output

    def test_bad_suppress_option(self, tmp_path: Path):
        path = _write(tmp_path, POD)
        result = CliRunner().invoke(cli, ["analyze", "--suppress", "IST0101", str(path)])
        assert result.exit_code == 2
        assert "Invalid suppression" in result.output

    def test_missing_path(self, tmp_path: Path):
        result = CliRunner().invoke(cli, ["analyze", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "Path not found" in result.output

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("key: [unclosed\n")
        result = CliRunner().invoke(cli, ["analyze", str(path)])
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output

    def test_config_file(self, tmp_path: Path):
        path = _write(tmp_path, POD, GATEWAY.format(app="gw"))
        config = tmp_path / "meshcheck.yml"
        config.write_text("disabled_analyzers: [gateway.SecretAnalyzer]\n")
        result = CliRunner().invoke(cli, ["--config", str(config), "analyze", str(path)])
        assert result.exit_code == 0
        assert "skipped (disabled)" in result.output

    def test_invalid_config_file(self, tmp_path: Path):
        path = _write(tmp_path, POD)
        config = tmp_path / "meshcheck.yml"
        config.write_text("failure_threshold: loud\n")
        result = CliRunner().invoke(cli, ["--config", str(config), "analyze", str(path)])
        assert result.exit_code == 1
        assert "Invalid settings" in result.output

    def test_namespace_option(self, tmp_path: Path):
        path = _write(tmp_path, GATEWAY.format(app="none").replace("  namespace: apps\n", ""))
        result = CliRunner().invoke(cli, ["analyze", "-n", "team", "--json", str(path)])
        assert json.loads(result.output)["issues"][0]["namespace"] == "team"

    def test_quiet(self, tmp_path: Path):
        path = _write(tmp_path, POD, SECRET, GATEWAY.format(app="gw"))
        result = CliRunner().invoke(cli, ["--quiet", "analyze", str(path)])
        assert result.exit_code == 0
        assert result.output == ""


class TestAnalyzersCommand:
    def test_lists_secret_analyzer(self):
        result = CliRunner().invoke(cli, ["analyzers"])
        assert result.exit_code == 0
        assert "gateway.SecretAnalyzer" in result.output
        assert "Gateway, Pod, Secret" in result.output

    def test_json(self):
        result = CliRunner().invoke(cli, ["analyzers", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)[0]["name"] == "gateway.SecretAnalyzer"
