"""
Resource controllers delegate to their service without touching the payload
and hand over the numeric form of the path id.
"""
import math
from unittest.mock import MagicMock

import pytest

from housing_api.routers.resource import ResourceController
from housing_api.routers.unit_manage import UnitManageController
from housing_api.routers.user_manage import UserManageController
from housing_api.schemas.unit_manage import CreateUnitManageDto, UpdateUnitManageDto
from housing_api.schemas.user_manage import UpdateUserManageDto


@pytest.fixture
def service():
    return MagicMock(name="service")


class TestDelegation:
    def test_create_passes_same_payload_object(self, service):
        payload = CreateUnitManageDto(code="A-1", floor=1)
        result = UnitManageController(service).create(payload)
        service.create.assert_called_once()
        assert service.create.call_args.args[0] is payload
        assert result is service.create.return_value

    def test_find_all(self, service):
        assert UserManageController(service).find_all() is service.find_all.return_value
        service.find_all.assert_called_once_with()

    @pytest.mark.parametrize("raw, expected", [("7", 7), ("0", 0), ("12345", 12345), ("-1", -1)])
    def test_find_one_converts_id(self, service, raw, expected):
        UnitManageController(service).find_one(raw)
        (arg,) = service.find_one.call_args.args
        assert arg == expected
        assert not isinstance(arg, str)

    def test_update_converts_id_and_keeps_payload(self, service):
        payload = UpdateUnitManageDto(status="occupied")
        result = UnitManageController(service).update("4", payload)
        service.update.assert_called_once_with(4, payload)
        assert service.update.call_args.args[1] is payload
        assert result is service.update.return_value

    def test_remove_returns_service_result_verbatim(self, service):
        sentinel = object()
        service.remove.return_value = sentinel
        assert UserManageController(service).remove("3") is sentinel
        service.remove.assert_called_once_with(3)


class TestNonNumericId:
    """Non-numeric ids are passed through as NaN, not rejected."""

    @pytest.mark.parametrize("method", ["find_one", "remove"])
    def test_nan_reaches_service(self, service, method):
        getattr(UnitManageController(service), method)("abc")
        (arg,) = getattr(service, method).call_args.args
        assert math.isnan(arg)

    def test_update_with_nan(self, service):
        payload = UpdateUserManageDto(full_name="x")
        UserManageController(service).update("abc", payload)
        arg, passed = service.update.call_args.args
        assert math.isnan(arg)
        assert passed is payload


class TestRouteTable:
    def test_routes_cover_crud(self, service):
        table = [(r.method, r.path) for r in UnitManageController(service).routes()]
        assert table == [
            ("POST", ""),
            ("GET", ""),
            ("GET", "/{id}"),
            ("PATCH", "/{id}"),
            ("DELETE", "/{id}"),
        ]

    def test_router_prefix(self, service):
        router = UserManageController(service).router()
        paths = {(route.path, tuple(sorted(route.methods))) for route in router.routes}
        assert ("/user-manage", ("POST",)) in paths
        assert ("/user-manage/{id}", ("DELETE",)) in paths

    def test_tags_not_shared_between_controllers(self, service):
        unit_router = UnitManageController(service).router()
        user_router = UserManageController(service).router()
        unit_router.tags.append("extra")
        assert user_router.tags == ["user-manage"]
        assert UnitManageController.tags == ("unit-manage",)
        assert ResourceController.tags == ()
