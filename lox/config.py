"""Runtime configuration for the lox shell, from command-line arguments with environment variable fallbacks.

```
LOX_LOG   ; log level name (DEBUG, INFO, ...), used when --log-level is not given
NO_COLOR  ; if set (to anything), diagnostics are not colored
```
"""

import logging
import os
from dataclasses import dataclass


@dataclass
class Config:
    log_level: int = logging.WARNING
    color: bool = True
    show_ast: bool = False
    prompt: str = ">>> "

    @classmethod
    def from_args(cls, args, environ=None):
        """Builds a Config from an argparse namespace. environ defaults to os.environ."""
        if environ is None:
            environ = os.environ

        level_name = (args.log_level or environ.get("LOX_LOG") or "WARNING").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"unknown log level '{level_name}'")

        return cls(
            log_level=level,
            color=not args.no_color and "NO_COLOR" not in environ,
            show_ast=args.ast,
            prompt=args.prompt if args.prompt is not None else cls.prompt,
        )
