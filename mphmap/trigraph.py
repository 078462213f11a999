"""A 3-uniform hypergraph with support for removing edges.

The number of vertices and edges must be known up front. Each vertex keeps
its degree and the first edge touching it; edges are chained per vertex.
"""

from typing import NamedTuple

INVALID_EDGE = 0xFFFFFFFF


class Edge(NamedTuple):
    """An edge joining three vertices."""

    v0: int
    v1: int
    v2: int


class TriGraph:
    """Hypergraph of edges over three vertices each."""

    def __init__(self, nvertices, nedges):
        self._capacity = nedges
        self._edges = []
        self._next_edge = []
        self._first_edge = [INVALID_EDGE] * nvertices
        self._vertex_degree = [0] * nvertices

    @property
    def edges(self):
        """Edges added so far, indexed by edge id."""
        return self._edges

    @property
    def vertex_degree(self):
        """Number of remaining edges touching each vertex."""
        return self._vertex_degree

    @property
    def first_edge(self):
        """Id of the first remaining edge of each vertex, or INVALID_EDGE."""
        return self._first_edge

    def add_edge(self, edge):
        """Append ``edge`` to the graph."""
        if len(self._edges) >= self._capacity:
            raise IndexError(f"graph already holds its {self._capacity} edges")
        edge = Edge(*edge)
        nvertices = len(self._first_edge)
        for vertex in edge:
            if not 0 <= vertex < nvertices:
                raise IndexError(f"vertex {vertex} out of range for {nvertices} vertices")
        edge_id = len(self._edges)
        self._edges.append(edge)
        self._next_edge.append([self._first_edge[vertex] for vertex in edge])
        for vertex in edge:
            self._first_edge[vertex] = edge_id
        for vertex in edge:
            self._vertex_degree[vertex] += 1

    def remove_edge(self, edge_id):
        """Unlink edge ``edge_id`` from each of its vertices."""
        if not 0 <= edge_id < len(self._edges):
            raise IndexError(f"no edge {edge_id}")
        for i, vertex in enumerate(self._edges[edge_id]):
            edge1 = self._first_edge[vertex]
            edge2 = INVALID_EDGE
            slot = 0
            while edge1 != edge_id and edge1 != INVALID_EDGE:
                edge2 = edge1
                vertices = self._edges[edge1]
                if vertices[0] == vertex:
                    slot = 0
                elif vertices[1] == vertex:
                    slot = 1
                else:
                    slot = 2
                edge1 = self._next_edge[edge1][slot]
            if edge1 == INVALID_EDGE:
                raise ValueError(f"edge {edge_id} is not linked to vertex {vertex}")
            if edge2 != INVALID_EDGE:
                self._next_edge[edge2][slot] = self._next_edge[edge1][i]
            else:
                self._first_edge[vertex] = self._next_edge[edge1][i]
            self._vertex_degree[vertex] -= 1

    def extract_edges_and_clear(self):
        """Return the list of edges and release every other structure."""
        edges = self._edges
        self._edges = []
        self._next_edge = []
        self._first_edge = []
        self._vertex_degree = []
        self._capacity = 0
        return edges

    def debug_string(self):
        """Describe every edge and every vertex's first edge, one per line."""
        lines = [
            f"{i}  {e[0]} {e[1]} {e[2]} nexts {n[0]} {n[1]} {n[2]}"
            for i, (e, n) in enumerate(zip(self._edges, self._next_edge))
        ]
        lines.extend(
            f"first for vertice {vertex} {first}"
            for vertex, first in enumerate(self._first_edge)
        )
        return "".join(line + "\n" for line in lines)