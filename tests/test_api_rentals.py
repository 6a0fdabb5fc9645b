"""HTTP tests for price quotes and the rental lifecycle."""

from decimal import Decimal

import pytest


def rental_payload(car_model_id: int, issue: str = "2024-01-01", ret: str = "2024-01-04") -> dict:
    return {"carModel": car_model_id, "issueDate": issue, "returnDate": ret}


@pytest.fixture
async def car_model(create_car_model):
    return await create_car_model(category="Economy", rental_price=Decimal("100"))


class TestCalculatePrice:
    async def test_quote(self, client, car_model, client_customer, client_user, headers) -> None:
        resp = await client.post(
            "/api/rentals/calculate-price",
            json=rental_payload(car_model.id),
            headers=headers(client_user),
        )

        assert resp.status == 200
        data = await resp.json()
        assert data["numberOfDays"] == 3
        assert data["dailyRate"] == 40.0
        assert data["priceBeforeDiscounts"] == 120.0
        assert data["discountApplied"] == 0
        assert data["discountDetails"] == []
        assert data["calculatedCost"] == 120.0
        assert data["deposit"] == 100.0
        assert data["finalCost"] == 220.0
        assert data["carModel"]["id"] == car_model.id
        assert data["customer"] == {
            "id": client_customer.id,
            "firstName": client_customer.first_name,
            "lastName": client_customer.last_name,
        }

    async def test_quote_with_discounts(
        self, client, create_car_model, create_rental, client_customer, client_user, headers, today
    ) -> None:
        old_car = await create_car_model(year=today.year - 6)
        for _ in range(3):
            await create_rental(client_customer, old_car)

        resp = await client.post(
            "/api/rentals/calculate-price",
            json=rental_payload(old_car.id),
            headers=headers(client_user),
        )

        data = await resp.json()
        assert data["discountApplied"] == 20
        assert data["calculatedCost"] == 96.0
        assert data["finalCost"] == 196.0
        assert [d["description"] for d in data["discountDetails"]] == [
            "Discount for car age (over 5 years)",
            "Loyal customer discount (3+ rentals)",
        ]

    async def test_no_customer_profile(self, client, car_model, client_user, headers) -> None:
        resp = await client.post(
            "/api/rentals/calculate-price",
            json=rental_payload(car_model.id),
            headers=headers(client_user),
        )

        assert resp.status == 404
        assert await resp.json() == {"msg": "Customer profile not found for this user."}

    async def test_missing_car_model(self, client, client_customer, client_user, headers) -> None:
        resp = await client.post(
            "/api/rentals/calculate-price",
            json=rental_payload(9999),
            headers=headers(client_user),
        )

        assert resp.status == 404
        assert await resp.json() == {"msg": "Car model not found."}

    async def test_return_date_must_follow_issue_date(self, client, car_model, client_customer, client_user, headers) -> None:
        resp = await client.post(
            "/api/rentals/calculate-price",
            json=rental_payload(car_model.id, issue="2024-01-04", ret="2024-01-04"),
            headers=headers(client_user),
        )

        assert resp.status == 400
        assert await resp.json() == {"msg": "Return date must be after issue date."}

    async def test_invalid_date(self, client, car_model, client_customer, client_user, headers) -> None:
        resp = await client.post(
            "/api/rentals/calculate-price",
            json=rental_payload(car_model.id, issue="yesterday"),
            headers=headers(client_user),
        )

        assert resp.status == 400
        assert (await resp.json())["errors"][0]["param"] == "issueDate"

    async def test_requires_token(self, client, car_model) -> None:
        resp = await client.post("/api/rentals/calculate-price", json=rental_payload(car_model.id))
        assert resp.status == 401


class TestCreateRental:
    async def test_create(self, client, car_model, client_customer, client_user, headers) -> None:
        resp = await client.post("/api/rentals", json=rental_payload(car_model.id), headers=headers(client_user))

        assert resp.status == 200
        data = await resp.json()
        assert data["status"] == "active"
        assert data["calculatedCost"] == 120.0
        assert data["deposit"] == 100.0
        assert data["finalCost"] == 220.0
        assert data["penalty"] == 0.0
        assert data["discount"] == 0
        assert data["carModel"]["brand"] == car_model.brand
        assert data["customer"]["id"] == client_customer.id

    async def test_dates_keep_utc_offset_when_read_back(
        self, client, car_model, client_customer, client_user, headers
    ) -> None:
        resp = await client.post("/api/rentals", json=rental_payload(car_model.id), headers=headers(client_user))
        created = await resp.json()

        resp = await client.get(f"/api/rentals/{created['id']}", headers=headers(client_user))
        fetched = await resp.json()

        assert fetched["issueDate"] == created["issueDate"]
        assert fetched["returnDate"] == created["returnDate"]
        assert fetched["issueDate"].endswith(("Z", "+00:00"))

    async def test_created_rental_is_listed(self, client, car_model, client_customer, client_user, headers) -> None:
        await client.post("/api/rentals", json=rental_payload(car_model.id), headers=headers(client_user))
        await client.post(
            "/api/rentals",
            json=rental_payload(car_model.id, issue="2024-02-01", ret="2024-02-11"),
            headers=headers(client_user),
        )

        resp = await client.get("/api/rentals", headers=headers(client_user))

        data = await resp.json()
        assert [r["issueDate"][:10] for r in data] == ["2024-02-01", "2024-01-01"]
        assert data[0]["calculatedCost"] == 250.0

    async def test_own_rentals_require_profile(self, client, client_user, headers) -> None:
        resp = await client.get("/api/rentals", headers=headers(client_user))
        assert resp.status == 404


class TestRentalAccess:
    async def test_owner_can_read_rental(self, client, car_model, create_rental, client_customer, client_user, headers) -> None:
        rental = await create_rental(client_customer, car_model)

        resp = await client.get(f"/api/rentals/{rental.id}", headers=headers(client_user))

        assert resp.status == 200
        assert (await resp.json())["id"] == rental.id

    async def test_stranger_cannot_read_rental(
        self, client, car_model, create_rental, create_user, client_customer, headers
    ) -> None:
        rental = await create_rental(client_customer, car_model)
        stranger = await create_user()

        resp = await client.get(f"/api/rentals/{rental.id}", headers=headers(stranger))

        assert resp.status == 401
        assert await resp.json() == {"msg": "Not authorized"}

    async def test_missing_rental(self, client, admin_user, headers) -> None:
        resp = await client.get("/api/rentals/9999", headers=headers(admin_user))
        assert resp.status == 404

    async def test_all_rentals_admin_only(self, client, car_model, create_rental, client_customer, client_user, admin_user, headers) -> None:
        await create_rental(client_customer, car_model)

        resp = await client.get("/api/rentals/all", headers=headers(client_user))
        assert resp.status == 403

        resp = await client.get("/api/rentals/all", headers=headers(admin_user))
        assert resp.status == 200
        assert len(await resp.json()) == 1


class TestRentalLifecycle:
    async def test_return(self, client, car_model, create_rental, client_customer, admin_user, headers) -> None:
        rental = await create_rental(client_customer, car_model)

        resp = await client.post(f"/api/rentals/{rental.id}/return", headers=headers(admin_user))

        assert resp.status == 200
        data = await resp.json()
        assert data["status"] == "completed"
        assert data["finalCost"] == 220.0

    async def test_return_requires_admin(self, client, car_model, create_rental, client_customer, client_user, headers) -> None:
        rental = await create_rental(client_customer, car_model)

        resp = await client.post(f"/api/rentals/{rental.id}/return", headers=headers(client_user))

        assert resp.status == 403

    async def test_penalty(self, client, car_model, create_rental, client_customer, admin_user, headers) -> None:
        rental = await create_rental(client_customer, car_model, final_cost=Decimal("200"))

        resp = await client.post(
            f"/api/rentals/{rental.id}/penalty",
            json={"penalty": 50},
            headers=headers(admin_user),
        )

        assert resp.status == 200
        data = await resp.json()
        assert data["penalty"] == 50.0
        assert data["finalCost"] == 250.0

    @pytest.mark.parametrize(
        "body", [{"penalty": 0}, {"penalty": -5}, {"penalty": "abc"}, {"penalty": 0.004}, {}]
    )
    async def test_invalid_penalty(self, client, car_model, create_rental, client_customer, admin_user, headers, body) -> None:
        rental = await create_rental(client_customer, car_model, final_cost=Decimal("200"))

        resp = await client.post(f"/api/rentals/{rental.id}/penalty", json=body, headers=headers(admin_user))

        assert resp.status == 400
        assert await resp.json() == {"msg": "Valid penalty amount is required."}

        resp = await client.get(f"/api/rentals/{rental.id}", headers=headers(admin_user))
        data = await resp.json()
        assert data["penalty"] == 0.0
        assert data["finalCost"] == 200.0

    async def test_penalty_for_missing_rental(self, client, admin_user, headers) -> None:
        resp = await client.post("/api/rentals/9999/penalty", json={"penalty": 10}, headers=headers(admin_user))
        assert resp.status == 404
