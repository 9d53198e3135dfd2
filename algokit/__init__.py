"""Classic algorithms: strings, transforms, number theory, graphs, flows and Li Chao trees."""

__version__ = "0.1.0"