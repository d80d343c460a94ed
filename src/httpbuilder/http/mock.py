from dataclasses import dataclass, field
from typing import List

from .types import TransportOutcome, TransportRequest


@dataclass
class MockTransport:
    outcomes: List[TransportOutcome]
    requests: List[TransportRequest] = field(default_factory=list)
    counter: int = 0

    async def __call__(self, request: TransportRequest) -> TransportOutcome:
        self.requests.append(request)
        try:
            return self.outcomes[self.counter]
        finally:
            self.counter = (self.counter + 1) % len(self.outcomes)
