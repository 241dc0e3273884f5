from typing import Optional, TextIO


class DebugLog:
    """Verbosity-levelled debug output.

    Nothing is written at level 0. Otherwise messages at or below the
    configured level go to `debug_file` when one is given, or to stdout.
    """
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = None):
        self.debug_level = debug_level
        self.debug_fp: Optional[TextIO] = (
            open(debug_file, 'w', encoding='utf-8') if debug_level > 0 and debug_file else None
        )

    def enabled(self, level: int = 1) -> bool:
        return self.debug_level >= level

    def debug(self, msg: str, level: int = 1):
        if self.debug_level >= level:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None
