"""Builders for application call transactions."""

from __future__ import annotations

from typing import Optional

from .transaction import ApplicationCallTransaction, OnComplete, StateSchema
from .types import Address


class AppCallBuilder:
    """Builds an ApplicationCallTransaction; the subclasses fix its kind."""

    def __init__(
        self,
        sender: Address,
        app_id: Optional[int],
        on_complete: OnComplete,
        *,
        approval_program: Optional[bytes] = None,
        clear_state_program: Optional[bytes] = None,
        global_state_schema: Optional[StateSchema] = None,
        local_state_schema: Optional[StateSchema] = None,
    ) -> None:
        self._sender = sender
        self._app_id = app_id
        self._on_complete = OnComplete(on_complete)
        self._approval_program = (
            bytes(approval_program) if approval_program is not None else None
        )
        self._clear_state_program = (
            bytes(clear_state_program) if clear_state_program is not None else None
        )
        self._global_state_schema = global_state_schema
        self._local_state_schema = local_state_schema
        self._accounts: Optional[list[Address]] = None
        self._app_arguments: Optional[list[bytes]] = None
        self._foreign_apps: Optional[list[int]] = None
        self._foreign_assets: Optional[list[int]] = None
        self._extra_pages = 0

    def accounts(self, accounts: list[Address]):
        self._accounts = list(accounts)
        return self

    def app_arguments(self, app_arguments: list[bytes]):
        self._app_arguments = [bytes(arg) for arg in app_arguments]
        return self

    def foreign_apps(self, foreign_apps: list[int]):
        self._foreign_apps = list(foreign_apps)
        return self

    def foreign_assets(self, foreign_assets: list[int]):
        self._foreign_assets = list(foreign_assets)
        return self

    def build(self) -> ApplicationCallTransaction:
        return ApplicationCallTransaction(
            sender=self._sender,
            app_id=self._app_id,
            on_complete=self._on_complete,
            accounts=self._accounts,
            approval_program=self._approval_program,
            app_arguments=self._app_arguments,
            clear_state_program=self._clear_state_program,
            foreign_apps=self._foreign_apps,
            foreign_assets=self._foreign_assets,
            global_state_schema=self._global_state_schema,
            local_state_schema=self._local_state_schema,
            extra_pages=self._extra_pages,
        )


class CreateApplication(AppCallBuilder):
    """Creates an application: no app id, no-op completion, programs and schemas."""

    def __init__(
        self,
        sender: Address,
        approval_program: bytes,
        clear_state_program: bytes,
        global_state_schema: StateSchema,
        local_state_schema: StateSchema,
    ) -> None:
        super().__init__(
            sender,
            None,
            OnComplete.NO_OP,
            approval_program=approval_program,
            clear_state_program=clear_state_program,
            global_state_schema=global_state_schema,
            local_state_schema=local_state_schema,
        )

    def extra_pages(self, extra_pages: int) -> CreateApplication:
        self._extra_pages = extra_pages
        return self


class UpdateApplication(AppCallBuilder):
    """Replaces the programs of an existing application."""

    def __init__(
        self,
        sender: Address,
        app_id: int,
        approval_program: bytes,
        clear_state_program: bytes,
    ) -> None:
        super().__init__(
            sender,
            app_id,
            OnComplete.UPDATE_APPLICATION,
            approval_program=approval_program,
            clear_state_program=clear_state_program,
        )


class CallApplication(AppCallBuilder):
    """Calls an application with no further effect."""

    def __init__(self, sender: Address, app_id: int) -> None:
        super().__init__(sender, app_id, OnComplete.NO_OP)


class ClearApplication(AppCallBuilder):
    """Runs the clear-state program and clears the sender's local state."""

    def __init__(self, sender: Address, app_id: int) -> None:
        super().__init__(sender, app_id, OnComplete.CLEAR_STATE)


class CloseApplication(AppCallBuilder):
    """Closes out the sender's local state after the approval program."""

    def __init__(self, sender: Address, app_id: int) -> None:
        super().__init__(sender, app_id, OnComplete.CLOSE_OUT)


class DeleteApplication(AppCallBuilder):
    """Deletes the application after the approval program."""

    def __init__(self, sender: Address, app_id: int) -> None:
        super().__init__(sender, app_id, OnComplete.DELETE_APPLICATION)


class OptInApplication(AppCallBuilder):
    """Allocates local state for the application in the sender's account."""

    def __init__(self, sender: Address, app_id: int) -> None:
        super().__init__(sender, app_id, OnComplete.OPT_IN)