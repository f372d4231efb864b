"""
===============================================================================
LISTBENCH - Configuration & Entry Point Test Suite
===============================================================================
YAML configuration loading (defaults, overrides, malformed files) and an
end-to-end run of the command-line entry point on a small configuration.
===============================================================================
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import io

import pytest
import yaml

from listbench.main import default_config, load_config, main, run

SAMPLE_CONFIG = os.path.join(
    os.path.dirname(__file__), '..', '..', 'config', 'benchmark_config.yaml'
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def write_config(tmp_path):
    """Return a helper that writes YAML text to a temp file and returns its path."""
    def _write(text):
        path = tmp_path / "benchmark_config.yaml"
        path.write_text(text)
        return str(path)
    return _write


# =============================================================================
# Test: load_config
# =============================================================================

class TestLoadConfig:

    def test_defaults_without_path(self):
        config = load_config()
        assert config == {
            'benchmark': {'warmup_iterations': 1000, 'test_iterations': 10000}
        }

    def test_default_config_is_fresh_copy(self):
        config = default_config()
        config['benchmark']['test_iterations'] = 1
        assert default_config()['benchmark']['test_iterations'] == 10000

    def test_sample_config_matches_defaults(self):
        assert load_config(SAMPLE_CONFIG) == default_config()

    def test_partial_override(self, write_config):
        path = write_config("benchmark:\n  test_iterations: 500\n")
        config = load_config(path)
        assert config['benchmark'] == {'warmup_iterations': 1000, 'test_iterations': 500}

    def test_empty_file_uses_defaults(self, write_config):
        assert load_config(write_config("")) == default_config()

    def test_unknown_keys_ignored(self, write_config):
        path = write_config("benchmark:\n  repeats: 5\nother: true\n")
        assert load_config(path) == default_config()

    @pytest.mark.parametrize("text", [
        "- 1\n- 2\n",
        "benchmark: 7\n",
        "benchmark:\n  test_iterations: lots\n",
        "benchmark:\n  warmup_iterations: 1.5\n",
        "benchmark:\n  warmup_iterations: true\n",
    ])
    def test_malformed_config_rejected(self, write_config, text):
        with pytest.raises(ValueError):
            load_config(write_config(text))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_unparsable_yaml(self, write_config):
        with pytest.raises(yaml.YAMLError):
            load_config(write_config("benchmark: [unclosed\n"))


# =============================================================================
# Test: End-to-end run
# =============================================================================

class TestEntryPoint:

    def test_run_prints_both_reports(self):
        out = io.StringIO()
        config = {'benchmark': {'warmup_iterations': 10, 'test_iterations': 100}}
        perf_test = run(config, out=out)

        assert len(perf_test.get_results()) == 18
        text = out.getvalue()
        assert "PERFORMANCE RESULTS (in microseconds)" in text
        assert "FINAL SCORE:" in text
        for operation in ("add(end)", "get(random)", "remove(middle)", "iteration"):
            assert operation in text

    def test_run_rejects_invalid_counts(self):
        config = {'benchmark': {'warmup_iterations': 10, 'test_iterations': 5}}
        with pytest.raises(ValueError):
            run(config, out=io.StringIO())

    def test_main_with_config(self, write_config, capsys):
        path = write_config(
            "benchmark:\n  warmup_iterations: 10\n  test_iterations: 100\n"
        )
        main(['--config', path, '--log-level', 'WARNING'])
        out = capsys.readouterr().out

        assert "ArrayList vs LinkedList Performance Test" in out
        assert "WINNER BY OPERATION:" in out
        assert "PRACTICAL RECOMMENDATIONS:" in out
        assert out.rstrip().endswith("=" * 64)
        assert "TEST COMPLETED" in out
