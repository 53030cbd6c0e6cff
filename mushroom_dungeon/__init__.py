"""A top-down 2D arcade game on pygame: a mushroom, walls, a patrolling enemy and a heal pickup."""

__version__ = "0.1.0"