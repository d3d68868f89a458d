"""Built-in example templates offered to users as starting points."""

from __future__ import annotations

from pydantic import BaseModel


class Sample(BaseModel):
    id: str
    template: str
    description: str = ""


DEFAULT_SAMPLES: list[Sample] = [
    Sample(
        id="default-1",
        template="MAIN.mover[{i:1:5}].position",
        description="Simple mover position (5 movers)",
    ),
    Sample(
        id="default-2",
        template="MAIN.mover[{i:1:3}].stMoverRef.NcToPlc.SetVelo",
        description="Mover velocity setpoint",
    ),
    Sample(
        id="default-3",
        template="Mover Axis {i:1:10}.SoftDrive {i:1:10}.SdScopeVariable.ActPos",
        description="NC axis actual position",
    ),
    Sample(
        id="default-4",
        template="GVL.station[{s:1:4}].sensor[{n:1:8}].value",
        description="Multi-level: 4 stations x 8 sensors",
    ),
    Sample(
        id="default-5",
        template="MAIN.mover[{i:1:3}].stMoverRef.NcToPlc[{j:1:3}]",
        description="Nested counters example",
    ),
]
