"""
graph2rdf - Exports classes, properties and class instances of a page graph to RDF.
"""

__version__ = "0.1.0"
