"""pocketcalc: a pocket calculator engine with an interactive shell.

Takes key presses (digits, operators, equals, clear, sign flip, unary ops)
or whole text expressions and renders the result as a bounded-width
display string, the way a cheap desk calculator would.

Usage:
    python -m pocketcalc repl                    # Interactive session
    python -m pocketcalc eval "2+(3x4)"          # One-shot expression
    python -m pocketcalc keys 6 + 3 =            # Replay key presses
"""
