from .helper import MackerelPluginHelper, default_tempfile_path

__all__ = ["MackerelPluginHelper", "default_tempfile_path"]
