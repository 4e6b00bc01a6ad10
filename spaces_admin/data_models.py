"""
Data Models SDK for spaces-admin.

Data models, their attributes and attribute options.
All methods are async and must be awaited.
"""

from __future__ import annotations

from typing import Any

from admin_core.core.exceptions import ClientValidationError
from admin_core.models.contracts.data_models import (
    Attribute,
    AttributeCreate,
    AttributeOption,
    DataModel,
    DataModelCreate,
    DataModelUpdate,
)
from admin_core.services.reorder import renumber_options, reorder, sparse_sort_orders

from .client import get_client, request_body, unwrap_item, unwrap_list, validated

DATA_MODELS_PATH = "/api/data-models"


class data_models:
    """
    Data model and attribute operations.

    Ordering changes are computed locally with ``reorder`` and persisted in
    one request: data models through the batch reorder endpoint, attributes
    through the attribute reorder endpoint, options by replacing the list.

    Data models read or written through the SDK are kept in the client's
    ``data_model_cache``; ``get`` serves from it and concurrent ``get`` calls
    for one id share a single request.

    Example:
        >>> from spaces_admin import data_models
        >>> models = await data_models.list(space_id="space-1")
        >>> models = await data_models.move(models, 3, 0)
    """

    # =========================================================================
    # Data models
    # =========================================================================

    @staticmethod
    async def list(page: int = 1, limit: int = 100, space_id: str | None = None) -> list[DataModel]:
        params: dict[str, Any] = {"page": page, "limit": limit}
        if space_id:
            params["space_id"] = space_id
        data = await get_client().get(DATA_MODELS_PATH, params=params)
        models = [DataModel.model_validate(m) for m in unwrap_list(data, "dataModels", "data_models", "data")]
        cache = get_client().data_model_cache
        for model in models:
            cache.set(model.id, model)
        return models

    @staticmethod
    async def create(**values: Any) -> DataModel:
        body = request_body(validated(DataModelCreate, **values))
        data = await get_client().post(DATA_MODELS_PATH, json=body)
        model = DataModel.model_validate(unwrap_item(data, "dataModel", "data_model"))
        get_client().data_model_cache.set(model.id, model)
        return model

    @staticmethod
    async def get(model_id: str, refresh: bool = False) -> DataModel:
        """
        Data model by id, from the cache when already known.

        Args:
            model_id: Data model id
            refresh: Drop the cached copy and fetch again
        """
        client = get_client()
        if refresh:
            client.data_model_cache.invalidate(model_id)

        async def load() -> DataModel:
            data = await client.get(f"{DATA_MODELS_PATH}/{model_id}")
            return DataModel.model_validate(unwrap_item(data, "dataModel", "data_model"))

        return await client.data_model_cache.get(model_id, load)

    @staticmethod
    async def update(model_id: str, **changes: Any) -> DataModel:
        body = request_body(validated(DataModelUpdate, **changes), partial=True)
        data = await get_client().put(f"{DATA_MODELS_PATH}/{model_id}", json=body)
        model = DataModel.model_validate(unwrap_item(data, "dataModel", "data_model"))
        get_client().data_model_cache.set(model.id, model)
        return model

    @staticmethod
    async def delete(model_id: str) -> None:
        await get_client().delete(f"{DATA_MODELS_PATH}/{model_id}")
        get_client().data_model_cache.invalidate(model_id)

    @staticmethod
    async def get_spaces(model_id: str) -> list[str]:
        """Ids of the spaces a data model is shared with."""
        data = await get_client().get(f"{DATA_MODELS_PATH}/{model_id}/spaces")
        if isinstance(data, dict) and isinstance(data.get("space_ids"), list):
            return data["space_ids"]
        return [s["id"] if isinstance(s, dict) else s for s in unwrap_list(data, "spaces")]

    @staticmethod
    async def set_spaces(model_id: str, space_ids: list[str]) -> None:
        await get_client().put(f"{DATA_MODELS_PATH}/{model_id}/spaces", json={"space_ids": space_ids})
        get_client().data_model_cache.invalidate(model_id)

    @staticmethod
    async def move(models: list[DataModel], from_index: int, to_index: int) -> list[DataModel]:
        """
        Move a data model and persist the new order in one request.

        Sort orders are rewritten as multiples of 100 for every model in
        ``models``. Nothing is sent when the indexes are equal.

        Returns:
            list[DataModel]: Models in their new order with updated sort_order
        """
        if from_index == to_index:
            return list(models)
        moved = reorder(models, from_index, to_index)
        orders = sparse_sort_orders(moved)
        await get_client().put(f"{DATA_MODELS_PATH}/reorder", json={"orders": orders})
        result = [
            model.model_copy(update={"sort_order": entry["sort_order"]})
            for model, entry in zip(moved, orders)
        ]
        cache = get_client().data_model_cache
        for model in result:
            cache.set(model.id, model)
        return result

    # =========================================================================
    # Attributes
    # =========================================================================

    @staticmethod
    async def list_attributes(model_id: str) -> list[Attribute]:
        data = await get_client().get(f"{DATA_MODELS_PATH}/{model_id}/attributes")
        return [Attribute.model_validate(a) for a in unwrap_list(data, "attributes")]

    @staticmethod
    async def create_attribute(model_id: str, **values: Any) -> Attribute:
        """
        Add an attribute to a data model.

        Options are renumbered to their list position before sending.

        Raises:
            ClientValidationError: invalid name, min > max, duplicate option
                values, or a SELECT attribute without options
        """
        attribute = validated(AttributeCreate, **values)
        attribute = attribute.model_copy(update={"options": renumber_options(attribute.options)})
        data = await get_client().post(
            f"{DATA_MODELS_PATH}/{model_id}/attributes", json=request_body(attribute)
        )
        return Attribute.model_validate(unwrap_item(data, "attribute"))

    @staticmethod
    async def get_attribute(attribute_id: str) -> Attribute:
        data = await get_client().get(f"{DATA_MODELS_PATH}/attributes/{attribute_id}")
        return Attribute.model_validate(unwrap_item(data, "attribute"))

    @staticmethod
    async def update_attribute(attribute_id: str, **changes: Any) -> Attribute:
        if "name" in changes and not changes["name"]:
            raise ClientValidationError("name", "Attribute name is required")
        data = await get_client().put(f"{DATA_MODELS_PATH}/attributes/{attribute_id}", json=changes)
        return Attribute.model_validate(unwrap_item(data, "attribute"))

    @staticmethod
    async def reorder_attributes(
        model_id: str, attributes: list[Attribute], from_index: int, to_index: int
    ) -> list[Attribute]:
        """Move an attribute and persist the order of all attributes."""
        moved = reorder(attributes, from_index, to_index)
        orders = [{"id": attribute.id, "order": index} for index, attribute in enumerate(moved)]
        await get_client().put(
            f"{DATA_MODELS_PATH}/{model_id}/attributes/reorder", json={"attribute_orders": orders}
        )
        return [a.model_copy(update={"order": index}) for index, a in enumerate(moved)]

    # =========================================================================
    # Options
    # =========================================================================

    @staticmethod
    async def set_options(
        model_id: str, attribute_id: str, options: list[AttributeOption | dict[str, Any]]
    ) -> list[AttributeOption]:
        """
        Replace an attribute's option list.

        Raises:
            ClientValidationError: duplicate option values
        """
        parsed = renumber_options([AttributeOption.model_validate(o) for o in options])
        values = [option.value for option in parsed]
        if len(values) != len(set(values)):
            raise ClientValidationError("options", "Option values must be unique")
        await get_client().put(
            f"{DATA_MODELS_PATH}/{model_id}/attributes/{attribute_id}/options",
            json={"options": [o.model_dump(mode="json", exclude_none=True) for o in parsed]},
        )
        return parsed

    @staticmethod
    async def move_option(
        model_id: str,
        attribute_id: str,
        options: list[AttributeOption],
        from_index: int,
        to_index: int,
    ) -> list[AttributeOption]:
        """Move an option and persist the whole list."""
        return await data_models.set_options(
            model_id, attribute_id, reorder(options, from_index, to_index)
        )
