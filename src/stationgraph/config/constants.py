DEFAULTS = {
    # Graph mode used when GraphStore is built without an explicit type
    "GRAPH_TYPE": "undirected",
    # add_edge also stores the reciprocal edge on undirected graphs
    "SYMMETRIZE_ON_INSERT": True,
    # Traversal sorts stored edge lists in place (False sorts a copy)
    "SORT_IN_PLACE": True,
    # Order non-comparable vertex types by hash() instead of failing
    "ALLOW_HASH_ORDERING": False,
    # Label between a vertex and its edges in the text rendering
    "RENDER_CONNECTOR": " : ",
}
