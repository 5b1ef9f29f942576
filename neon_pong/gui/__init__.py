"""
PyGame front-end of Neon Pong
"""
