"""
Unit tests for the command-line driver.
"""

from wann.__main__ import ARROWS, MULTIPLIERS_UP, main


class TestArrows:

    def test_shapes(self):
        assert list(ARROWS) == ["up", "down", "left", "right"]
        assert all(len(shape) == 6 for shape in ARROWS.values())
        assert len(MULTIPLIERS_UP) == len(ARROWS)

    def test_same_shapes_as_test_fixture(self, arrows):
        assert list(ARROWS.values()) == arrows

    def test_right_arrow(self):
        """The bottom-left pixel of the right arrow is faint."""
        assert ARROWS["right"] == [1.0, 1.0, 1.0, 0.1, 0.0, 0.0]


class TestMain:

    def test_prints_source(self, capsys):
        assert main(['--generations', '3', '--population-size', '6', '--seed', '1']) == 0

        out = capsys.readouterr().out
        assert out.startswith("import math\n")
        assert "def wann_network(inputs):" in out

    def test_generated_source_runs(self, capsys):
        main(['--generations', '3', '--population-size', '6', '--seed', '1', '--function-name', 'up_arrow'])
        namespace = {}
        exec(capsys.readouterr().out, namespace)
        assert isinstance(namespace['up_arrow'](ARROWS["up"]), float)

    def test_verbose(self, capsys):
        assert main(['--generations', '2', '--population-size', '6', '--seed', '1', '--verbose']) == 0
        out = capsys.readouterr().out
        assert "------ generation 2" in out
        assert "Network training complete" in out

    def test_invalid_population_size(self, capsys):
        assert main(['--population-size', '0']) == 1
        assert "error:" in capsys.readouterr().err

    def test_invalid_function_name(self, capsys):
        assert main(['--generations', '1', '--population-size', '3', '--function-name', 'not valid']) == 1
        assert "not a valid Python function name" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(['--config', str(tmp_path / 'missing.ini')]) == 1
        assert "not found" in capsys.readouterr().err

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / 'arrows.ini'
        path.write_text("[POPULATION_INIT]\npopulation_size = 6\ninitial_cxn_fraction = 0.5\n\n"
                        "[TERMINATION]\nmax_number_generations = 2\n")
        assert main(['--config', str(path), '--seed', '3']) == 0
        assert "def wann_network(inputs):" in capsys.readouterr().out
