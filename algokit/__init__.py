"""Classic sorting, searching, tree, greedy, dynamic-programming, graph,
Huffman and N-Queens algorithms, with a calculator and a car rental counter."""

__version__ = "0.1.0"