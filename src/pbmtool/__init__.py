__version__ = "1.0.0"

from .core import Bitmap, PbmError, PbmFormatError, read_pbm  # noqa: E402

__all__ = ["Bitmap", "PbmError", "PbmFormatError", "read_pbm", "__version__"]
