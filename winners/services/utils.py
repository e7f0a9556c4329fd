from typing import List

from winners.core.schemas import DrawResult


def format_report(result: DrawResult) -> str:
    """Header, blank line, one `  <rank>. <name>` line per winner, trailing blank line."""
    lines: List[str] = [
        f"🎉 Randomly selected {len(result.winners)} winner(s) from {result.participants} participants:",
        "",
    ]
    lines.extend(f"  {w.position}. {w.name}" for w in result.winners)
    lines.append("")
    return "\n".join(lines) + "\n"
