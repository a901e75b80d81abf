from __future__ import annotations

import json

import pytest
import responses

from clients.motofix_client_sdk.exceptions import ResponseFormatError
from clients.motofix_client_sdk.mechanics_client import MechanicsClient
from clients.motofix_client_sdk.models import MechanicCreate, MechanicUpdate, PaymentType, RequestStatus
from clients.motofix_client_sdk.payments_client import PaymentsClient
from clients.motofix_client_sdk.queries import MechanicsQuery, PaymentsQuery, RequestsQuery
from clients.motofix_client_sdk.requests_client import RequestsClient
from clients.motofix_client_sdk.stats_client import StatsClient

BASE_URL = "https://api.example.com"

STATS = {
    "total_requests": 10,
    "completed_jobs": 7,
    "pending_jobs": 2,
    "total_mechanics": 4,
    "verified_mechanics": 3,
    "revenue_collected_ugx": 500000,
    "paid_to_mechanics_ugx": 350000,
    "as_of": "2024-06-01T08:00:00Z",
}


@responses.activate
def test_stats_client_derives_dashboard_chart_and_payment_stats(api_session, auth_store) -> None:
    auth_store.set_token("abc")
    responses.add(responses.GET, f"{BASE_URL}/admin/stats", json=STATS, status=200)
    client = StatsClient(session=api_session)

    stats = client.fetch_dashboard_stats()
    chart = client.fetch_revenue_chart()
    payment_stats = client.fetch_payment_stats()

    assert stats.profit == 150000
    assert stats.verified_mechanics == 3
    assert len(chart) == 1
    assert chart[0].date == "2024-06-01T08:00:00Z"
    assert chart[0].amount == 500000
    assert payment_stats.net == 150000
    assert all(call.request.url == f"{BASE_URL}/admin/stats" for call in responses.calls)


@responses.activate
def test_list_requests_sends_filters_and_parses_page(api_session, auth_store) -> None:
    auth_store.set_token("abc")
    responses.add(
        responses.GET,
        f"{BASE_URL}/admin/requests",
        json={
            "data": [
                {
                    "id": 1,
                    "customer_phone": "+256701234567",
                    "service_type": "Tire Repair",
                    "location": "Kampala Central",
                    "status": "in_progress",
                    "mechanic_name": None,
                    "created_at": "2024-01-15T10:30:00Z",
                }
            ],
            "total": 11,
            "page": 2,
            "page_size": 10,
        },
        status=200,
    )

    page = RequestsClient(session=api_session).list_requests(RequestsQuery(page=2, status="in_progress"))

    assert responses.calls[0].request.url == f"{BASE_URL}/admin/requests?status=in_progress&page=2&pageSize=10"
    assert page.total_pages == 2
    assert page.data[0].id == "1"
    assert page.data[0].status is RequestStatus.IN_PROGRESS


@responses.activate
def test_list_mechanics_maps_is_verified(api_session, auth_store) -> None:
    auth_store.set_token("abc")
    responses.add(
        responses.GET,
        f"{BASE_URL}/admin/mechanics",
        json={
            "items": [
                {
                    "id": "m1",
                    "name": "John Okello",
                    "phone": "+256701234567",
                    "location": "Kampala Central",
                    "rating": 4.8,
                    "jobs_completed": 156,
                    "is_verified": True,
                    "joined_at": "2023-06-15T00:00:00Z",
                }
            ],
            "total": 1,
        },
        status=200,
    )

    page = MechanicsClient(session=api_session).list_mechanics(MechanicsQuery(verified_only=True))

    assert "verified=true" in responses.calls[0].request.url
    assert page.data[0].verified is True
    assert page.data[0].jobs_completed == 156


@responses.activate
def test_mechanic_mutations_use_expected_routes(api_session, auth_store) -> None:
    auth_store.set_token("abc")
    created = {"id": "m9", "name": "Moses Kasule", "phone": "0705678901", "location": "Wandegeya", "is_verified": False}
    responses.add(responses.POST, f"{BASE_URL}/admin/mechanics", json=created, status=201)
    responses.add(responses.PATCH, f"{BASE_URL}/admin/mechanics/m9", json={**created, "is_verified": True}, status=200)
    responses.add(responses.DELETE, f"{BASE_URL}/admin/mechanics/m9", status=204)
    client = MechanicsClient(session=api_session)

    mechanic = client.create_mechanic(MechanicCreate(name="Moses Kasule", phone="0705678901", location="Wandegeya"))
    updated = client.update_mechanic("m9", MechanicUpdate(is_verified=True))
    client.delete_mechanic("m9")

    assert mechanic.id == "m9"
    assert updated.verified is True
    assert json.loads(responses.calls[0].request.body) == {
        "name": "Moses Kasule",
        "phone": "0705678901",
        "location": "Wandegeya",
        "is_verified": False,
    }
    assert json.loads(responses.calls[1].request.body) == {"is_verified": True}
    assert responses.calls[2].request.method == "DELETE"


@responses.activate
def test_list_payments(api_session, auth_store) -> None:
    auth_store.set_token("abc")
    responses.add(
        responses.GET,
        f"{BASE_URL}/admin/payments",
        json={
            "data": [
                {
                    "id": "p1",
                    "date": "2024-01-15T10:30:00Z",
                    "transaction_id": "TX-1",
                    "phone": "+256701234567",
                    "amount": 50000,
                    "type": "payout",
                    "status": "success",
                }
            ],
            "total": 1,
        },
        status=200,
    )

    page = PaymentsClient(session=api_session).list_payments(PaymentsQuery(type="payout"))

    assert responses.calls[0].request.url == f"{BASE_URL}/admin/payments?type=payout&page=1&pageSize=10"
    assert page.data[0].type is PaymentType.PAYOUT
    assert page.data[0].reason is None


@responses.activate
def test_null_numeric_fields_default_to_zero(api_session, auth_store) -> None:
    auth_store.set_token("abc")
    mechanic = {
        "id": 1,
        "name": "James Mugisha",
        "phone": "+256703456789",
        "location": "Makindye",
        "rating": None,
        "jobs_completed": None,
        "is_verified": None,
        "joined_at": None,
    }
    payment = {
        "id": "p2",
        "date": "2024-01-15T10:30:00Z",
        "transaction_id": "TX-2",
        "phone": "+256701234567",
        "amount": None,
        "type": "collection",
        "status": "pending",
    }
    responses.add(responses.GET, f"{BASE_URL}/admin/mechanics", json={"data": [mechanic]}, status=200)
    responses.add(responses.GET, f"{BASE_URL}/admin/payments", json={"data": [payment]}, status=200)

    mechanics = MechanicsClient(session=api_session).list_mechanics()
    payments = PaymentsClient(session=api_session).list_payments()

    assert mechanics.data[0].rating == 0
    assert mechanics.data[0].jobs_completed == 0
    assert mechanics.data[0].verified is False
    assert payments.data[0].amount == 0


@responses.activate
def test_malformed_rows_raise_response_format_error(api_session, auth_store) -> None:
    auth_store.set_token("abc")
    responses.add(responses.GET, f"{BASE_URL}/admin/requests", json={"data": [{"id": "r1", "status": "lost"}]}, status=200)

    with pytest.raises(ResponseFormatError) as excinfo:
        RequestsClient(session=api_session).list_requests()

    assert excinfo.value.code == "RESPONSE_FORMAT_ERROR"
    assert excinfo.value.trace_id == "trace-test"
    assert excinfo.value.details


@responses.activate
def test_non_json_success_body_raises_response_format_error(api_session, auth_store) -> None:
    auth_store.set_token("abc")
    responses.add(responses.GET, f"{BASE_URL}/admin/stats", body="<html>maintenance</html>", status=200)

    with pytest.raises(ResponseFormatError) as excinfo:
        StatsClient(session=api_session).fetch_dashboard_stats()

    assert excinfo.value.body == "<html>maintenance</html>"
    assert auth_store.get_token() == "abc"
