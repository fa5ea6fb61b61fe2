"""Game domain services: scoring, turn rotation and the session archive.

Scoring and turn rotation are pure functions over ``GameState`` that return
a result variant; the keeper owns locking and broadcasting, keeping transport
concerns out of the game mechanics.
"""

