from byzop.testing.chain import (
    FakeContract,
    FakeWeb3,
    RecordedCall,
    RecordedTransaction,
)

__all__ = [
    "FakeContract",
    "FakeWeb3",
    "RecordedCall",
    "RecordedTransaction",
]
