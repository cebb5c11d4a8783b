"""
Unit tests for network visualization.

Only the generated Graphviz description is checked; nothing is rendered.
"""

import graphviz

from wann.phenotype import visualize_network


class TestVisualizeNetwork:

    def test_returns_digraph(self, identity_network):
        assert isinstance(visualize_network(identity_network), graphviz.Digraph)

    def test_every_connection_drawn(self, identity_network):
        source = visualize_network(identity_network).source
        for edge in ("0 -> 3", "1 -> 3", "3 -> 2", "1 -> 2"):
            assert edge in source
        assert source.count("->") == identity_network.number_connections

    def test_labels(self, identity_network):
        source = visualize_network(identity_network).source
        assert "id=0" in source
        assert "id=3\\nIDN" in source
        assert "shared weight = 0.5000" in source

    def test_clusters(self, identity_network):
        source = identity_network.visualize().source
        assert "cluster_input" in source
        assert "cluster_hidden" in source
        assert "cluster_output" in source

    def test_no_hidden_cluster_without_hidden_neurons(self, rng):
        from wann.genotype import Network
        source = visualize_network(Network(2, rng=rng)).source
        assert "cluster_hidden" not in source
