"""
Team balancer: split a rated roster into two evenly matched teams.
"""
