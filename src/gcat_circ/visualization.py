from typing import TYPE_CHECKING, Optional, Tuple

import igraph as ig
import matplotlib.pyplot as plt
from matplotlib.ticker import AutoLocator

# Use TYPE_CHECKING for type hints without runtime imports
if TYPE_CHECKING:
    from .graph_builder import RepresentingGraph


def draw_representing_graph(
    graph: "RepresentingGraph",
    ax: Optional[plt.Axes] = None,
    show_axes: bool = False,
    figsize: Tuple[float, float] = (6, 5),
    **kwargs,
) -> plt.Axes:
    """
    Draw a representing graph with its highlighted edges.

    Cycle edges are drawn red, longest path edges green and all other edges
    black.

    Parameters
    ----------
    graph : RepresentingGraph
        The graph to draw, e.g. from `Code.get_representing_graph`.
    ax : matplotlib.axes.Axes, optional
        The axis on which to draw the graph. If None, a new figure and axis will be created.
    show_axes : bool, default False
        Whether to show the x- and y-axis.
    figsize : tuple(float, float), default (6, 5)
        Figure size (width, height) in inches when creating a new figure.
    **kwargs : dict
        Additional keyword arguments to pass to igraph.plot.

    Returns
    -------
    matplotlib.axes.Axes
        The axis containing the drawn graph.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)

    g = graph.to_igraph()
    if g.vcount() == 0:
        print("Warning: representing graph has no vertices, nothing to draw.")
        return ax

    kwargs.setdefault("vertex_size", 30)
    kwargs.setdefault("vertex_label_size", 8)
    ig.plot(g, target=ax, **kwargs)
    if show_axes:
        ax.spines["top"].set_visible(True)
        ax.spines["bottom"].set_visible(True)
        ax.spines["left"].set_visible(True)
        ax.spines["right"].set_visible(True)
        ax.xaxis.set_major_locator(AutoLocator())
        ax.yaxis.set_major_locator(AutoLocator())

    return ax
