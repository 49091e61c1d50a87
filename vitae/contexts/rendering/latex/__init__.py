"""LaTeX renderers."""

from vitae.contexts.rendering.latex.moderncv import (
    ModerncvBankingRenderer,
    ModerncvCasualRenderer,
    ModerncvClassicRenderer,
    ModerncvRenderer,
)

__all__ = [
    "ModerncvBankingRenderer",
    "ModerncvCasualRenderer",
    "ModerncvClassicRenderer",
    "ModerncvRenderer",
]
