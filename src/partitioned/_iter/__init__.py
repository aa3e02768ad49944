from ._main import BaseIter, Iter, Seq
from ._partitioned import Partition, Partitioned, partition_by
from ._upstream import Upstream
from ._zip_with_next import ZipWithNext, zip_with_next

__all__ = [
    "BaseIter",
    "Iter",
    "Partition",
    "Partitioned",
    "Seq",
    "Upstream",
    "ZipWithNext",
    "partition_by",
    "zip_with_next",
]
