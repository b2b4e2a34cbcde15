"""Small worked exercises: container drills, design patterns, sockets and threads."""

__version__ = "0.1.0"
__all__ = [
    "expand_vector",
    "bounded_list",
    "flyweight",
    "observer",
    "visitor",
    "box",
    "sequences",
    "mappings",
    "diagonal",
    "client",
    "server",
    "workers",
    "hello",
]