"""
Rules of the 4-player game of Hearts with a built-in computer player
"""
