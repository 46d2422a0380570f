"""Admin recruitment master screen.

Each ``CrudPanel`` drives one record collection the way the admin page does:
a searchable table loaded through the query cache, a create/edit dialog whose
form is validated before anything is sent, a confirmation dialog gating
deletes, and an active switch per row. Writes are pessimistic: the table only
changes after the list is re-fetched from the backend, so a failed request
never alters it.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel

from workmongolia.client.api_client import ApiClient
from workmongolia.client.forms import FormState
from workmongolia.client.notifications import Notifier
from workmongolia.client.query_cache import QueryCache
from workmongolia.core.config import settings
from workmongolia.core.exceptions import RequestFailedError
from workmongolia.core.logging import get_logger
from workmongolia.schemas.master import (
    JobOptionCreateRequest,
    PreferredIndustryCreateRequest,
    SkillCreateRequest,
)

logger = get_logger(__name__)

Record = Dict[str, Any]

ADMIN_PREFIX = f"{settings.API_V1_PREFIX}/admin"
JOB_OPTIONS_PREFIX = f"{ADMIN_PREFIX}/job-options"
OPTION_SEARCH_FIELDS = ("name", "nameKo", "nameEn", "nameMn")


@dataclass(frozen=True)
class CollectionConfig:
    """Describes one record collection managed by a panel"""

    key: str
    label: str
    list_url: str
    form_schema: Type[BaseModel]
    search_fields: Tuple[str, ...]
    invalidate_prefix: Optional[str] = None
    # Field that `name` is derived from when left blank
    name_source: Optional[str] = None

    @property
    def cache_prefix(self) -> str:
        return self.invalidate_prefix or self.list_url


def job_option_collection(key: str, label: str, slug: str,
                          form_schema: Type[BaseModel] = JobOptionCreateRequest,
                          name_source: Optional[str] = None) -> CollectionConfig:
    return CollectionConfig(
        key=key,
        label=label,
        list_url=f"{JOB_OPTIONS_PREFIX}/{slug}",
        form_schema=form_schema,
        search_fields=OPTION_SEARCH_FIELDS,
        invalidate_prefix=JOB_OPTIONS_PREFIX,
        name_source=name_source,
    )


COLLECTIONS = (
    job_option_collection("departments", "Department", "departments"),
    job_option_collection("employment_types", "Employment type", "employment-types"),
    job_option_collection("experience_levels", "Experience level", "experience-levels"),
    job_option_collection(
        "preferred_industries", "Preferred industry", "preferred-industries",
        form_schema=PreferredIndustryCreateRequest,
        name_source="nameEn",
    ),
    CollectionConfig(
        key="skills",
        label="Skill",
        list_url=f"{ADMIN_PREFIX}/skills",
        form_schema=SkillCreateRequest,
        search_fields=("name", "description"),
    ),
)


class CrudPanel:
    """List, search, create, edit, delete and toggle for one collection"""

    def __init__(self, config: CollectionConfig, client: ApiClient, cache: QueryCache, notifier: Notifier):
        self.config = config
        self.client = client
        self.cache = cache
        self.notifier = notifier

        self.records: List[Record] = []
        self.search_query = ""
        self.is_loading = False
        self.is_pending = False
        self.mounted = True
        self._load_seq = 0

        self.form: Optional[FormState] = None
        self.editing: Optional[Record] = None
        self.pending_delete: Optional[Record] = None

    # -- list ---------------------------------------------------------------

    async def refresh(self) -> bool:
        """
        Load the list through the cache

        A result that arrives after a newer load has started is dropped.

        Returns:
            True if the table now reflects the backend
        """
        self._load_seq += 1
        seq = self._load_seq
        self.is_loading = True
        try:
            records = await self.cache.fetch(
                self.config.list_url, lambda: self.client.get(self.config.list_url)
            )
        except RequestFailedError as e:
            if self.mounted and seq == self._load_seq:
                self.notifier.error(f"Could not load {self.config.label.lower()} list: {e.message}")
            return False
        finally:
            if seq == self._load_seq:
                self.is_loading = False

        if not self.mounted or seq != self._load_seq:
            return False
        self.records = list(records)
        return True

    def set_search(self, query: str) -> None:
        self.search_query = query

    @property
    def visible_records(self) -> List[Record]:
        """Rows matching the search box, case-insensitively"""
        query = self.search_query.strip().lower()
        if not query:
            return list(self.records)
        return [
            record for record in self.records
            if any(query in str(record.get(field) or "").lower() for field in self.config.search_fields)
        ]

    def find(self, record_id: int) -> Optional[Record]:
        return next((record for record in self.records if record["id"] == record_id), None)

    # -- create / edit ------------------------------------------------------

    @property
    def is_form_open(self) -> bool:
        return self.form is not None

    def open_create(self) -> FormState:
        self.editing = None
        self.form = FormState(self.config.form_schema)
        return self.form

    def open_edit(self, record: Record) -> FormState:
        """
        Open the dialog prefilled from ``record``

        A name that was derived from ``name_source`` is left blank, so it is
        derived again from the edited value on submit.
        """
        self.editing = record
        initial = dict(record)
        source = self.config.name_source
        if source and initial.get("name") == initial.get(source):
            initial["name"] = None
        self.form = FormState(self.config.form_schema, initial=initial)
        return self.form

    def close_form(self) -> None:
        self.form = None
        self.editing = None

    async def submit(self) -> bool:
        """
        Validate the open form and send it

        Nothing is sent while the form is invalid; field messages are left in
        ``form.errors``. On a failed request the dialog stays open and the
        table is untouched.
        """
        if self.form is None:
            return False

        model = self.form.validate()
        if model is None:
            return False

        payload = model.model_dump(mode="json", by_alias=True, exclude_none=self.editing is None)
        editing = self.editing
        if editing is None:
            method, url, done = "POST", self.config.list_url, "added"
        else:
            method, url, done = "PUT", f"{self.config.list_url}/{editing['id']}", "updated"

        if not await self._write(method, url, payload):
            return False

        self.close_form()
        self.notifier.success(f"{self.config.label} {done}.")
        await self._reload()
        return True

    # -- delete -------------------------------------------------------------

    @property
    def is_delete_dialog_open(self) -> bool:
        return self.pending_delete is not None

    def request_delete(self, record: Record) -> None:
        self.pending_delete = record

    def cancel_delete(self) -> None:
        self.pending_delete = None

    async def confirm_delete(self) -> bool:
        record = self.pending_delete
        if record is None:
            return False

        if not await self._write("DELETE", f"{self.config.list_url}/{record['id']}"):
            return False

        self.pending_delete = None
        self.notifier.success(f"{self.config.label} deleted.")
        await self._reload()
        return True

    # -- toggle -------------------------------------------------------------

    async def toggle_active(self, record: Record) -> bool:
        """Flip one record's active flag and re-fetch the list"""
        payload = {"isActive": not record.get("isActive", False)}
        if not await self._write("PATCH", f"{self.config.list_url}/{record['id']}", payload):
            return False
        await self._reload()
        return True

    # -- lifecycle ----------------------------------------------------------

    def unmount(self) -> None:
        """Detach the panel; responses arriving later are discarded"""
        self.mounted = False

    async def _write(self, method: str, url: str, payload: Any = None) -> bool:
        self.is_pending = True
        try:
            await self.client.request(method, url, payload)
        except RequestFailedError as e:
            if self.mounted:
                self.notifier.error(e.message)
                if e.status_code == 404:
                    # The record vanished server-side; reconcile the table
                    await self._reload()
            return False
        finally:
            self.is_pending = False
        return self.mounted

    async def _reload(self) -> None:
        self.cache.invalidate(self.config.cache_prefix)
        await self.refresh()


class RecruitmentMasterScreen:
    """The recruitment master page: one panel per collection"""

    def __init__(
        self,
        client: ApiClient,
        cache: Optional[QueryCache] = None,
        notifier: Optional[Notifier] = None,
        collections: Tuple[CollectionConfig, ...] = COLLECTIONS
    ):
        self.client = client
        self.cache = cache or QueryCache()
        self.notifier = notifier or Notifier()
        self.panels: Dict[str, CrudPanel] = {
            config.key: CrudPanel(config, client, self.cache, self.notifier)
            for config in collections
        }

    def __getitem__(self, key: str) -> CrudPanel:
        return self.panels[key]

    async def load_all(self) -> bool:
        """Load every panel concurrently; True if all succeeded"""
        results = await asyncio.gather(*(panel.refresh() for panel in self.panels.values()))
        return all(results)

    def unmount(self) -> None:
        for panel in self.panels.values():
            panel.unmount()
        logger.info("Recruitment master screen unmounted")
