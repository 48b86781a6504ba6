"""
Tests for drawing representing graphs.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from gcat_circ import Code, draw_representing_graph, get_representing_graph


class TestDrawRepresentingGraph:
    """Test the matplotlib drawing helper."""

    def teardown_method(self):
        plt.close("all")

    def test_draw_on_new_axes(self):
        graph = get_representing_graph(Code(["ACG", "CGG", "AC"]), show_longest_paths=True)
        ax = draw_representing_graph(graph)
        assert isinstance(ax, plt.Axes)

    def test_draw_on_given_axes(self):
        _, ax = plt.subplots()
        code = Code(["ACGG", "GGGC", "GCAC", "GGAC", "AC"])
        graph = get_representing_graph(code, show_cycles=True)
        assert draw_representing_graph(graph, ax=ax, show_axes=True) is ax

    def test_draw_empty_graph(self, capsys):
        graph = get_representing_graph(Code(["A", "C"]))
        draw_representing_graph(graph)
        assert "Warning" in capsys.readouterr().out

    def test_code_draw_component(self):
        code = Code(["ACGG", "CGGC", "AC"])
        ax = code.draw_representing_graph(component=2, show_cycles=True)
        assert isinstance(ax, plt.Axes)
