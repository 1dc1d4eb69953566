"""Smoke tests for the padsmith command line."""

import json

import pytest
from click.testing import CliRunner

from padsmith import __version__
from padsmith.cli.main import cli
from padsmith.models import Button, Macropad
from padsmith.services import MappingStore


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config(temp_dir):
    return temp_dir / "mapping.json"


def invoke(runner, *args):
    return runner.invoke(cli, [str(arg) for arg in args])


class TestCliBasics:
    """Test help and version output."""

    @pytest.mark.integration
    def test_help(self, runner):
        result = invoke(runner, "--help")
        assert result.exit_code == 0
        for command in ("validate", "show", "init", "layout", "set", "keys", "families"):
            assert command in result.output

    @pytest.mark.integration
    def test_version(self, runner):
        result = invoke(runner, "--version")
        assert result.exit_code == 0
        assert __version__ in result.output

    @pytest.mark.integration
    def test_keys(self, runner):
        result = invoke(runner, "keys")
        assert result.exit_code == 0
        assert "ctrl-" in result.output
        assert "volup" in result.output
        assert "click" in result.output

    @pytest.mark.integration
    def test_families(self, runner):
        result = invoke(runner, "families")
        assert result.exit_code == 0
        assert "0x8840/0x8842" in result.output
        assert "0x8890" in result.output
        assert "cyan" in result.output


class TestInit:
    """Test the init command."""

    @pytest.mark.integration
    def test_creates_file(self, runner, config):
        result = invoke(runner, "init", "-c", config, "--rows", 3, "--cols", 4, "--knobs", 2)

        assert result.exit_code == 0
        assert MappingStore().read(config) == Macropad.create_default(3, 4, 2)

    @pytest.mark.integration
    def test_refuses_overwrite(self, runner, config):
        invoke(runner, "init", "-c", config)
        result = invoke(runner, "init", "-c", config, "--rows", 1)

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert MappingStore().read(config).device.rows == 2

    @pytest.mark.integration
    def test_force_overwrites(self, runner, config):
        invoke(runner, "init", "-c", config)
        result = invoke(runner, "init", "-c", config, "--rows", 1, "--force")

        assert result.exit_code == 0
        assert MappingStore().read(config).device.rows == 1


class TestSet:
    """Test the set command."""

    @pytest.mark.integration
    def test_set_button(self, runner, config):
        result = invoke(runner, "set", "-c", config, "--layer", 2, "--row", 1, "--col", 3, "--delay", 40, "ctrl-c")

        assert result.exit_code == 0
        assert "layer 2 row 1 btn 3" in result.output
        button = MappingStore().read(config).get_button(1, 0, 2)
        assert button == Button(delay=40, mapping="ctrl-c")

    @pytest.mark.integration
    def test_set_knob(self, runner, config):
        result = invoke(runner, "set", "-c", config, "--knob", 1, "--part", "cw", "volup")

        assert result.exit_code == 0
        assert MappingStore().read(config).get_knob(0, 0).cw.mapping == "volup"

    @pytest.mark.integration
    def test_requires_target(self, runner, config):
        result = invoke(runner, "set", "-c", config, "--row", 1, "a")
        assert result.exit_code == 2

    @pytest.mark.integration
    def test_out_of_range(self, runner, config):
        result = invoke(runner, "set", "-c", config, "--row", 9, "--col", 1, "a")
        assert result.exit_code == 1
        assert "No button" in result.output

    @pytest.mark.integration
    def test_set_does_not_validate(self, runner, config):
        # Bad mappings can be stored and are reported by validate
        result = invoke(runner, "set", "-c", config, "--row", 1, "--col", 1, "foobar")
        assert result.exit_code == 0


class TestValidate:
    """Test the validate command."""

    @pytest.mark.integration
    def test_default_mapping_valid(self, runner, config):
        result = invoke(runner, "validate", "-c", config)

        assert result.exit_code == 0
        assert "OK: mapping is valid" in result.output
        assert config.exists()

    @pytest.mark.integration
    def test_product_id_hex(self, runner, config):
        result = invoke(runner, "validate", "-c", config, "--product-id", "0x8842")
        assert result.exit_code == 0
        assert "0x8840/0x8842" in result.output

    @pytest.mark.integration
    def test_unknown_product_id(self, runner, config):
        result = invoke(runner, "validate", "-c", config, "-p", "0x1234")
        assert result.exit_code == 1
        assert "0x1234" in result.output
        assert not config.exists()

    @pytest.mark.integration
    def test_bad_product_id(self, runner, config):
        result = invoke(runner, "validate", "-c", config, "-p", "pad")
        assert result.exit_code == 2

    @pytest.mark.integration
    def test_reports_location(self, runner, config):
        invoke(runner, "set", "-c", config, "--row", 2, "--col", 1, "ctrl-foobar")
        result = invoke(runner, "validate", "-c", config)

        assert result.exit_code == 1
        assert "ERROR: layer 1 row 2 btn 1: unknown key - foobar" in result.output

    @pytest.mark.integration
    def test_delay_warning(self, runner, config):
        invoke(runner, "set", "-c", config, "--row", 1, "--col", 1, "--delay", 50, "a")
        result = invoke(runner, "validate", "-c", config, "-p", "0x8890")

        assert result.exit_code == 0
        assert "doesn't support delay" in result.output
        assert "OK: mapping is valid for 0x8890" in result.output

    @pytest.mark.integration
    def test_invalid_json(self, runner, config):
        config.write_text("{", encoding="utf-8")
        result = invoke(runner, "validate", "-c", config)
        assert result.exit_code == 1
        assert "invalid syntax" in result.output

    @pytest.mark.integration
    def test_not_utf8(self, runner, config):
        config.write_bytes(b"\xff\xfe")
        result = invoke(runner, "validate", "-c", config)
        assert result.exit_code == 1
        assert "ERROR: Mapping file is not UTF-8 text" in result.output

    @pytest.mark.integration
    def test_config_from_environment(self, runner, config):
        result = runner.invoke(cli, ["validate"], env={"PADSMITH_CONFIG": str(config)})
        assert result.exit_code == 0
        assert config.exists()


class TestShowAndLayout:
    """Test show and layout."""

    @pytest.mark.integration
    def test_show_prints_json(self, runner, config):
        invoke(runner, "init", "-c", config)
        result = invoke(runner, "show", "-c", config)

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["device"]["rows"] == 2
        assert len(data["layers"]) == 3

    @pytest.mark.integration
    def test_layout_keeps_overlap(self, runner, config):
        invoke(runner, "set", "-c", config, "--row", 1, "--col", 2, "shift-a")
        result = invoke(runner, "layout", "-c", config, "--rows", 4, "--cols", 2, "--layers", 1, "-o", "clockwise")

        assert result.exit_code == 0
        assert "1 layers, 4x2 grid" in result.output
        macropad = MappingStore().read(config)
        assert macropad.device.orientation.value == "clockwise"
        assert len(macropad.layers) == 1
        assert macropad.get_button(0, 0, 1).mapping == "shift-a"
        assert invoke(runner, "validate", "-c", config).exit_code == 0

    @pytest.mark.integration
    def test_logging_options(self, runner, config, temp_dir):
        log_file = temp_dir / "logs" / "padsmith.log"
        result = invoke(runner, "--log-file", log_file, "--log-level", "DEBUG", "validate", "-c", config)

        assert result.exit_code == 0
        assert log_file.exists()
