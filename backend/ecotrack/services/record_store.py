import enum
import logging
import uuid
from typing import Any, Dict, List, NamedTuple, Optional, Type, Union

from pydantic import BaseModel
from sqlalchemy.orm import Session

from ecotrack.models import ElectricityRecord, WaterRecord, WasteRecord, SystemSettings
from ecotrack.schemas import (
    ElectricityRecordCreate, ElectricityRecordResponse,
    WaterRecordCreate, WaterRecordResponse,
    WasteRecordCreate, WasteRecordResponse,
    SettingsResponse, SettingsUpdate,
)

logger = logging.getLogger(__name__)


class RecordKind(str, enum.Enum):
    ELECTRICITY = "electricity"
    WATER = "water"
    WASTE = "waste"


class KindBinding(NamedTuple):
    model: Type
    create_schema: Type[BaseModel]
    response_schema: Type[BaseModel]


# Registry of record kinds
KIND_BINDINGS: Dict[RecordKind, KindBinding] = {
    RecordKind.ELECTRICITY: KindBinding(ElectricityRecord, ElectricityRecordCreate, ElectricityRecordResponse),
    RecordKind.WATER: KindBinding(WaterRecord, WaterRecordCreate, WaterRecordResponse),
    RecordKind.WASTE: KindBinding(WasteRecord, WasteRecordCreate, WasteRecordResponse),
}

# Fields that only exist on the way in
INPUT_ONLY_FIELDS = {"id", "price_per_kg"}


class RecordStore:
    """
    Persistence for the three record kinds and the process-wide settings.
    Every mutating call runs in its own commit.
    """

    def __init__(self, db: Session):
        self.db = db

    def _payload(self, kind: RecordKind, data: Union[BaseModel, Dict[str, Any]]) -> Dict[str, Any]:
        binding = KIND_BINDINGS[kind]
        if not isinstance(data, binding.create_schema):
            data = binding.create_schema.model_validate(data if isinstance(data, dict) else data.model_dump())
        return data.model_dump(exclude=INPUT_ONLY_FIELDS)

    def list_all(self, kind: RecordKind) -> List[BaseModel]:
        binding = KIND_BINDINGS[kind]
        rows = self.db.query(binding.model).order_by(binding.model.date, binding.model.created_at).all()
        return [binding.response_schema.model_validate(row) for row in rows]

    def get(self, kind: RecordKind, record_id: str) -> Optional[BaseModel]:
        binding = KIND_BINDINGS[kind]
        row = self.db.query(binding.model).filter(binding.model.id == record_id).first()
        return binding.response_schema.model_validate(row) if row else None

    def create(self, kind: RecordKind, data: Union[BaseModel, Dict[str, Any]], record_id: Optional[str] = None) -> BaseModel:
        binding = KIND_BINDINGS[kind]
        record_id = record_id or getattr(data, "id", None) or (data.get("id") if isinstance(data, dict) else None)
        payload = self._payload(kind, data)

        if record_id:
            if self.db.query(binding.model).filter(binding.model.id == record_id).first():
                raise ValueError(f"{kind.value} record {record_id} already exists")
        else:
            record_id = str(uuid.uuid4())

        row = binding.model(id=record_id, **payload)
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        logger.info(f"Created {kind.value} record {record_id}")
        return binding.response_schema.model_validate(row)

    def replace(self, kind: RecordKind, record_id: str, data: Union[BaseModel, Dict[str, Any]]) -> Optional[BaseModel]:
        """Full replace of a record's fields. Returns None when the id is unknown."""
        binding = KIND_BINDINGS[kind]
        row = self.db.query(binding.model).filter(binding.model.id == record_id).first()
        if not row:
            logger.warning(f"Replace of unknown {kind.value} record {record_id} ignored")
            return None

        for field, value in self._payload(kind, data).items():
            setattr(row, field, value)

        self.db.commit()
        self.db.refresh(row)
        logger.info(f"Replaced {kind.value} record {record_id}")
        return binding.response_schema.model_validate(row)

    def remove(self, kind: RecordKind, record_id: str) -> bool:
        binding = KIND_BINDINGS[kind]
        row = self.db.query(binding.model).filter(binding.model.id == record_id).first()
        if not row:
            logger.warning(f"Delete of unknown {kind.value} record {record_id} ignored")
            return False

        self.db.delete(row)
        self.db.commit()
        logger.info(f"Deleted {kind.value} record {record_id}")
        return True

    def get_settings(self) -> SettingsResponse:
        row = self.db.query(SystemSettings).order_by(SystemSettings.id).first()
        if not row:
            # Nothing configured yet: no units, every goal 0
            return SettingsResponse()
        return SettingsResponse.model_validate(row)

    def save_settings(self, partial: Union[SettingsUpdate, Dict[str, Any]]) -> SettingsResponse:
        if isinstance(partial, dict):
            partial = SettingsUpdate(**partial)
        update_data = partial.model_dump(exclude_unset=True)

        row = self.db.query(SystemSettings).order_by(SystemSettings.id).first()
        if not row:
            row = SystemSettings(units=[], electricity_goal=0.0, water_goal=0.0, waste_goal=0.0)
            self.db.add(row)

        for field, value in update_data.items():
            if value is None:
                continue
            if field == "units":
                value = list(value)
            setattr(row, field, value)

        self.db.commit()
        self.db.refresh(row)
        logger.info(f"Saved settings: {sorted(update_data)}")
        return SettingsResponse.model_validate(row)
