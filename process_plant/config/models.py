from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional

from process_plant.core.enums import DeviceType

# --- STREAM MODELS ---

class StreamConfig(BaseModel):
    name: str
    mass_flow: float = 0.0

    @field_validator('name')
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Stream name must not be empty")
        return v

# --- DEVICE MODELS ---

class DeviceConfig(BaseModel):
    id: str
    type: DeviceType
    inputs_count: Optional[int] = Field(default=None, ge=0)  # mixer only
    double_output: bool = False  # reactor only
    inputs: List[str] = []
    outputs: List[str] = []

    @model_validator(mode='after')
    def check_type_params(self) -> 'DeviceConfig':
        if self.type == DeviceType.MIXER and self.inputs_count is None:
            # Default to the number of wired inlets
            self.inputs_count = len(self.inputs)
        if self.type == DeviceType.REACTOR and self.inputs_count is not None:
            raise ValueError(f"Device '{self.id}': inputs_count is only valid for mixers")
        return self

# --- FLOWSHEET ---

class FlowsheetConfig(BaseModel):
    name: str = "Process Plant"
    version: str = "1.0"
    description: str = ""
    streams: List[StreamConfig] = []
    devices: List[DeviceConfig] = []

    @field_validator('version', mode='before')
    @classmethod
    def version_as_str(cls, v):
        # YAML reads 1.0 as a float
        return str(v)

    @model_validator(mode='after')
    def check_unique_ids(self) -> 'FlowsheetConfig':
        device_ids = [d.id for d in self.devices]
        if len(device_ids) != len(set(device_ids)):
            raise ValueError(f"Duplicate device IDs in flowsheet '{self.name}'")
        stream_names = [s.name for s in self.streams]
        if len(stream_names) != len(set(stream_names)):
            raise ValueError(f"Duplicate stream names in flowsheet '{self.name}'")
        return self
