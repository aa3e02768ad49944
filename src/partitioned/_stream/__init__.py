from ._main import BaseStream, Stream
from ._partitioned import AsyncPartition, AsyncPartitioned, apartition_by
from ._upstream import AsyncUpstream
from ._zip_with_next import AsyncZipWithNext, azip_with_next

__all__ = [
    "AsyncPartition",
    "AsyncPartitioned",
    "AsyncUpstream",
    "AsyncZipWithNext",
    "BaseStream",
    "Stream",
    "apartition_by",
    "azip_with_next",
]
