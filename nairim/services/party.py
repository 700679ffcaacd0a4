import logging
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel

from nairim.database import transaction
from nairim.services.base import SoftDeleteService

logger = logging.getLogger(__name__)


class PartyService(SoftDeleteService):
    """
    Сервис участника с адресами и контактами (собственник, арендатор, агентство).
    При обновлении переданные списки адресов и контактов заменяют прежние
    """
    address_link: Any
    contact_link: Any
    link_key: str
    columns: Tuple[str, ...] = ()
    unique_columns: Tuple[str, ...] = ()

    def _check_unique(self, data: Dict[str, Any], exclude_id: Optional[str] = None) -> None:
        for column in self.unique_columns:
            self.ensure_unique(column, data.get(column), exclude_id=exclude_id)

    def create(self, payload: BaseModel):
        data = payload.model_dump(include=set(self.columns))
        self._check_unique(data)

        with transaction(self.db):
            obj = self.model(**data)
            self.db.add(obj)
            self.db.flush()
            self.attach_addresses(self.address_link, self.link_key, obj.id, payload.addresses)
            self.attach_contacts(self.contact_link, self.link_key, obj.id, payload.contacts)

        logger.info(
            f"{self.entity_name} {obj.id} created with "
            f"{len(payload.addresses)} addresses, {len(payload.contacts)} contacts"
        )
        return self.get(obj.id)

    def update(self, entity_id: str, payload: BaseModel):
        obj = self.get(entity_id)
        data = payload.model_dump(exclude_unset=True, include=set(self.columns))
        self._check_unique(data, exclude_id=entity_id)

        with transaction(self.db):
            self.apply_changes(obj, data)
            if payload.addresses is not None:
                self.detach_links(self.address_link, self.link_key, entity_id)
                self.attach_addresses(self.address_link, self.link_key, entity_id, payload.addresses)
            if payload.contacts is not None:
                self.detach_links(self.contact_link, self.link_key, entity_id)
                self.attach_contacts(self.contact_link, self.link_key, entity_id, payload.contacts)

        logger.info(f"{self.entity_name} {entity_id} updated: {sorted(data)}")
        return self.get(entity_id)
