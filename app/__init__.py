"""
Tweeter backend: signup/signin, tweets, follow edges and a follow feed.
"""
