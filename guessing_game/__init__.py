from guessing_game.app import (
    HIGH,
    LOW,
    Outcome,
    ask_in_range,
    ask_int,
    compare,
    draw_secret,
    main,
    play_round,
)

__all__ = [
    "HIGH",
    "LOW",
    "Outcome",
    "ask_in_range",
    "ask_int",
    "compare",
    "draw_secret",
    "main",
    "play_round",
]
