"""
Core road network components: models, graph and contraction hierarchies.
"""
