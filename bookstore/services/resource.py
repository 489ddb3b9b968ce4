"""
Resource Service

Orchestrates one request against one resource type. Every operation runs
the same fixed sequence and stops at the first failed step:

    input check       -> 400 Bad Request
    field validation  -> 400 Bad Request
    existence check   -> 404 Not Found       (update / delete)
    reference check   -> 400 Bad Request     (resources with foreign keys)
    mutation          -> 500 Internal Error  (create; update/delete when
                                              report_mutation_failures)
    map response      -> 200 / 201 / 204

Rejections happen before any write reaches the database.

Any exception raised along the way is caught at the end of the operation,
the session is rolled back, the exception is logged, and the caller gets
a generic internal error. Nothing escapes a service method.

The logger is passed in by the caller (see bookstore.dependencies) so each
service logs under its own name and tests can capture it.
"""

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from bookstore.database import Base
from bookstore.mappers import EntityMapper
from bookstore.repositories import Repository
from bookstore.schemas import FieldError
from bookstore.services.results import ServiceResult

EntityT = TypeVar("EntityT", bound=Base)
ResponseT = TypeVar("ResponseT", bound=BaseModel)

Validator = Callable[[BaseModel], list[FieldError]]


class ResourceService(Generic[EntityT, ResponseT]):
    """
    Generic list / get / create / update / delete for one resource.

    Subclasses set resource_name and pass in the validators. Resources that
    reference other resources override check_references().

    Attributes:
        repository: Persistence for the resource's entity
        mapper: DTO <-> entity translation
        logger: Where progress and failures are logged
        report_mutation_failures: Return INTERNAL_ERROR instead of
            NO_CONTENT when an update or delete write fails
    """

    resource_name = "Resources"

    def __init__(
        self,
        repository: Repository[EntityT],
        mapper: EntityMapper[EntityT, ResponseT],
        logger: logging.Logger,
        validate_create: Validator,
        validate_update: Validator,
        report_mutation_failures: bool = False,
    ):
        self.repository = repository
        self.mapper = mapper
        self.logger = logger
        self.validate_create = validate_create
        self.validate_update = validate_update
        self.report_mutation_failures = report_mutation_failures

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------
    def check_references(self, dto: BaseModel) -> list[FieldError]:
        """Verify foreign references in the payload. None by default."""
        return []

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    def get_all(self) -> ServiceResult:
        """List every record. An empty table is a successful empty list."""
        location = self._location("GetAll")
        try:
            self.logger.info(f"{location}: Attempted call")
            entities = self.repository.find_all()
            response = self.mapper.to_dto(entities)
            self.logger.info(f"{location}: Successfully retrieved {len(response)} records")
            return ServiceResult.ok(response)
        except Exception as exc:
            return self._unexpected_failure(location, exc)

    def get_by_id(self, id: int) -> ServiceResult:
        """Fetch one record, NOT_FOUND when it does not exist."""
        location = self._location("GetById")
        try:
            self.logger.info(f"{location}: Attempted call for id: {id}")
            entity = self.repository.find_by_id(id)

            if entity is None:
                self.logger.warning(f"{location}: Failed to retrieve record with id: {id}")
                return ServiceResult.not_found()

            response = self.mapper.to_dto(entity)
            self.logger.info(f"{location}: Successfully got record with id: {id}")
            return ServiceResult.ok(response)
        except Exception as exc:
            return self._unexpected_failure(location, exc)

    def create(self, dto: BaseModel | None) -> ServiceResult:
        """
        Validate, stage and commit a new record.

        Returns:
            CREATED with the stored record (id assigned by the database),
            BAD_REQUEST for an absent or invalid payload or a dangling
            reference, INTERNAL_ERROR when staging or commit fails.
        """
        location = self._location("Create")
        try:
            self.logger.info(f"{location}: Create attempted")
            if dto is None:
                self.logger.warning(f"{location}: Empty request was submitted")
                return ServiceResult.bad_request([self._missing_body()])

            errors = self.validate_create(dto)
            if errors:
                self.logger.warning(f"{location}: Data was incomplete: {self._describe(errors)}")
                return ServiceResult.bad_request(errors)

            errors = self.check_references(dto)
            if errors:
                self.logger.warning(f"{location}: Invalid reference: {self._describe(errors)}")
                return ServiceResult.bad_request(errors)

            entity = self.mapper.to_domain(dto)

            if not self.repository.create(entity):
                return self._internal_error(f"{location}: Creation failed")

            if not self.repository.save():
                return self._internal_error(f"{location}: Nothing was written on commit")

            response = self.mapper.to_dto(entity)
            self.logger.info(f"{location}: Creation was successful, id: {response.id}")
            return ServiceResult.created(response)
        except Exception as exc:
            return self._unexpected_failure(location, exc)

    def update(self, id: int, dto: BaseModel | None) -> ServiceResult:
        """
        Replace the mutable fields of an existing record.

        The path id must be positive and equal to the payload id; a
        mismatch is rejected, never corrected.
        """
        location = self._location("Update")
        try:
            self.logger.info(f"{location}: Update attempted on record with id: {id}")
            errors = self._check_update_input(id, dto)
            if errors:
                self.logger.warning(f"{location}: Update failed with bad data id: {id}")
                return ServiceResult.bad_request(errors)

            errors = self.validate_update(dto)
            if errors:
                self.logger.warning(f"{location}: Data was incomplete: {self._describe(errors)}")
                return ServiceResult.bad_request(errors)

            if not self.repository.exists(id):
                self.logger.warning(f"{location}: Failed to retrieve record with id: {id}")
                return ServiceResult.not_found()

            errors = self.check_references(dto)
            if errors:
                self.logger.warning(f"{location}: Invalid reference: {self._describe(errors)}")
                return ServiceResult.bad_request(errors)

            entity = self.mapper.to_domain(dto)

            if not self.repository.update(entity):
                failure = self._internal_error(f"{location}: Update failed with id: {id}")
                if self.report_mutation_failures:
                    return failure
            else:
                self.logger.info(f"{location}: Successfully updated record with id: {id}")

            return ServiceResult.no_content()
        except Exception as exc:
            return self._unexpected_failure(location, exc)

    def delete(self, id: int) -> ServiceResult:
        """Remove an existing record. Deleting twice gives NOT_FOUND the second time."""
        location = self._location("Delete")
        try:
            self.logger.info(f"{location}: Delete attempted on record with id: {id}")
            if id < 1:
                self.logger.warning(f"{location}: Delete failed on record with id: {id}")
                return ServiceResult.bad_request([self._invalid_id(id)])

            entity = self.repository.find_by_id(id)

            if entity is None:
                self.logger.warning(f"{location}: Failed to retrieve record with id: {id}")
                return ServiceResult.not_found()

            if not self.repository.delete(entity):
                failure = self._internal_error(f"{location}: Delete failed on record with id: {id}")
                if self.report_mutation_failures:
                    return failure
            else:
                self.logger.info(f"{location}: Successfully deleted record with id: {id}")

            return ServiceResult.no_content()
        except Exception as exc:
            return self._unexpected_failure(location, exc)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _location(self, action: str) -> str:
        return f"{self.resource_name} - {action}"

    def _check_update_input(self, id: int, dto: BaseModel | None) -> list[FieldError]:
        if id < 1:
            return [self._invalid_id(id)]
        if dto is None:
            return [self._missing_body()]
        if id != dto.id:
            return [
                FieldError(
                    field="id",
                    message=f"Payload id {dto.id} does not match path id {id}",
                )
            ]
        return []

    @staticmethod
    def _invalid_id(id: int) -> FieldError:
        return FieldError(field="id", message=f"id must be a positive integer, got {id}")

    @staticmethod
    def _missing_body() -> FieldError:
        return FieldError(field="body", message="Request body is required")

    @staticmethod
    def _describe(errors: list[FieldError]) -> str:
        return ", ".join(error.message for error in errors)

    def _internal_error(self, message: str) -> ServiceResult:
        """Log the real cause and hand the caller the generic error."""
        self.logger.error(message)
        return ServiceResult.internal_error()

    def _unexpected_failure(self, location: str, exc: Exception) -> ServiceResult:
        try:
            self.repository.rollback()
        except SQLAlchemyError as rollback_exc:
            self.logger.error(f"{location}: Rollback failed: {rollback_exc}")
        self.logger.error(f"{location}: {exc} - {exc.__cause__}", exc_info=exc)
        return ServiceResult.internal_error()
