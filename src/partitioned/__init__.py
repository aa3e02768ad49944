from ._core import Config, Pipeable, get_config, set_config
from ._errors import PartitionedError, PartitionNotConsumedError, UpstreamDivergedError
from ._iter import (
    BaseIter,
    Iter,
    Partition,
    Partitioned,
    Seq,
    Upstream,
    ZipWithNext,
    partition_by,
    zip_with_next,
)
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
)
from ._stream import (
    AsyncPartition,
    AsyncPartitioned,
    AsyncUpstream,
    AsyncZipWithNext,
    BaseStream,
    Stream,
    apartition_by,
    azip_with_next,
)

__all__ = [
    "NONE",
    "AsyncPartition",
    "AsyncPartitioned",
    "AsyncUpstream",
    "AsyncZipWithNext",
    "BaseIter",
    "BaseStream",
    "Config",
    "Err",
    "Iter",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Partition",
    "PartitionNotConsumedError",
    "Partitioned",
    "PartitionedError",
    "Pipeable",
    "Result",
    "ResultUnwrapError",
    "Seq",
    "Some",
    "Stream",
    "Upstream",
    "UpstreamDivergedError",
    "ZipWithNext",
    "apartition_by",
    "azip_with_next",
    "get_config",
    "partition_by",
    "set_config",
    "zip_with_next",
]
