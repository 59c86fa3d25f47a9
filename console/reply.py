from dataclasses import dataclass, field


@dataclass
class Reply:
    lines: list[str] = field(default_factory=list)
    quit: bool = False

    def text(self, *lines: str) -> 'Reply':
        return Reply(
            lines=self.lines + list(lines),
            quit=self.quit
        )

def reply(*lines: str, quit: bool = False) -> Reply:
    return Reply(
        lines=list(lines),
        quit=quit
    )
