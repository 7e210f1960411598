"""Elapsed-time text for the side panel"""

def format_elapsed(seconds: int) -> str:
    """MM:SS, zero padded; minutes are not capped (3665 -> '61:05')."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}:{seconds % 60:02d}"

class TimerDisplay:
    def __init__(self):
        self.text = format_elapsed(0)
        self.updates = 0

    def update(self, seconds: int):
        self.text = format_elapsed(seconds)
        self.updates += 1
