# funclab/config/accumulator_config.py
from pydantic import BaseModel

from funclab.accumulator import SharedConstants
from funclab.utils.intmath import OverflowPolicy


class AccumulatorConfig(BaseModel):
    k1: int = 10
    k2: int = 100
    initial_state: int = 100
    policy: OverflowPolicy = OverflowPolicy.WRAP

    def shared_constants(self) -> SharedConstants:
        """Build the single constants object every accumulator will reference."""
        return SharedConstants(k1=self.k1, k2=self.k2)
