from .chart import plot_agreement, plot_nodes_by_depth, plot_standings

__all__ = ["plot_agreement", "plot_nodes_by_depth", "plot_standings"]
