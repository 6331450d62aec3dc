class Constants:
    # Finish index of a vertex not yet finished in the current pass
    NO_FINISH = -1

    DEFAULT_VERTEX_COUNT = 8
    DEFAULT_EDGE_COUNT = 12

    # Generator gives up after edge_count * MAX_ATTEMPTS_FACTOR draws
    MAX_ATTEMPTS_FACTOR = 20

    LATEX_RADIUS = 1.5
