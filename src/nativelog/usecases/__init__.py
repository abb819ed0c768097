from .write_line import LineWriter, write_all, write_line

__all__ = ["LineWriter", "write_all", "write_line"]
