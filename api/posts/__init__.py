"""
Post feature: list, create and delete posts.
"""
