"""Vendor, wedding and booking endpoint tests, focused on ownership rules."""

from __future__ import annotations

from datetime import date, timedelta
import unittest

from api_case import ApiTestCase


class VendorCatalogueApiTests(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.photo_id = self.add_vendor("Lensa Studio", "Photographer")
        self.cater_id = self.add_vendor("Dapur Kenduri", "Catering")
        self.hidden_id = self.add_vendor("Pending Florist", "Florist", approved=False)

    def test_list_shows_only_approved_vendors(self) -> None:
        response = self.client.get("/vendors")

        self.assertEqual(response.status_code, 200)
        ids = {vendor["id"] for vendor in response.json()}
        self.assertEqual(ids, {self.photo_id, self.cater_id})

    def test_list_filters_by_category_and_name(self) -> None:
        by_category = self.client.get("/vendors", params={"category": "catering"}).json()
        by_name = self.client.get("/vendors", params={"q": "lensa"}).json()

        self.assertEqual([v["id"] for v in by_category], [self.cater_id])
        self.assertEqual([v["id"] for v in by_name], [self.photo_id])

    def test_unapproved_vendor_detail_is_not_found(self) -> None:
        self.assertEqual(self.client.get(f"/vendors/{self.photo_id}").status_code, 200)

        response = self.client.get(f"/vendors/{self.hidden_id}")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"], "Vendor not found")

    def test_out_of_range_vendor_id_is_a_bad_request(self) -> None:
        for path in ("/vendors/99999999999999999999", "/vendors/2147483648", "/vendors/0"):
            with self.subTest(path=path):
                response = self.client.get(path)

                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()["details"]["fields"], ["vendor_id"])

    def test_top_vendors_ordered_by_booking_count(self) -> None:
        token = self.register("ann@x.com")["token"]
        wedding = self.client.post(
            "/weddings", headers=self.auth_headers(token), json={"title": "Akad Nikah"}
        ).json()
        for vendor_id in (self.cater_id, self.cater_id, self.photo_id):
            self.client.post(
                "/bookings",
                headers=self.auth_headers(token),
                json={"wedding_id": wedding["id"], "vendor_id": vendor_id},
            )

        response = self.client.get("/vendors/top", params={"limit": 5})

        self.assertEqual([v["id"] for v in response.json()], [self.cater_id, self.photo_id])
        self.assertEqual(len(self.client.get("/vendors/top", params={"limit": 1}).json()), 1)


class VendorProfileApiTests(ApiTestCase):
    settings_overrides = {"ADMIN_EMAIL": "admin@x.com", "ADMIN_PASSWORD": "admin-pass"}

    def test_created_vendor_needs_admin_approval(self) -> None:
        owner_token = self.register("vee@x.com", role="vendor")["token"]

        created = self.client.post(
            "/vendors",
            headers=self.auth_headers(owner_token),
            json={"business_name": "Vee Videos", "category": "Videographer"},
        )
        self.assertEqual(created.status_code, 201)
        vendor = created.json()
        self.assertFalse(vendor["is_approved"])
        self.assertEqual(self.client.get(f"/vendors/{vendor['id']}").status_code, 404)

        denied = self.client.post(f"/vendors/{vendor['id']}/approve", headers=self.auth_headers(owner_token))
        self.assertEqual(denied.status_code, 403)

        admin_token = self.client.post(
            "/auth/login", json={"email": "admin@x.com", "password": "admin-pass"}
        ).json()["token"]
        approved = self.client.post(f"/vendors/{vendor['id']}/approve", headers=self.auth_headers(admin_token))
        self.assertEqual(approved.status_code, 200)
        self.assertTrue(approved.json()["is_approved"])
        self.assertEqual(self.client.get(f"/vendors/{vendor['id']}").status_code, 200)

    def test_approving_out_of_range_vendor_id_is_a_bad_request(self) -> None:
        admin_token = self.client.post(
            "/auth/login", json={"email": "admin@x.com", "password": "admin-pass"}
        ).json()["token"]

        response = self.client.post("/vendors/99999999999999999999/approve", headers=self.auth_headers(admin_token))

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["code"], "MissingFields")

    def test_creating_vendor_requires_token(self) -> None:
        response = self.client.post("/vendors", json={"business_name": "Anon"})

        self.assertEqual(response.status_code, 401)


class BookingOwnershipApiTests(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.ann = self.register("ann@x.com")["token"]
        self.bob = self.register("bob@x.com")["token"]
        self.vendor_id = self.add_vendor("Lensa Studio")
        self.unapproved_id = self.add_vendor("Pending Florist", "Florist", approved=False)
        self.ann_wedding = self._wedding(self.ann, "Ann & Adam", date.today() + timedelta(days=30))

    def _wedding(self, token: str, title: str, when: date | None) -> dict:
        response = self.client.post(
            "/weddings",
            headers=self.auth_headers(token),
            json={"title": title, "date": when.isoformat() if when else None, "venue": "Dewan"},
        )
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def _book(self, token: str, wedding_id: int, vendor_id: int, **extra):
        return self.client.post(
            "/bookings",
            headers=self.auth_headers(token),
            json={"wedding_id": wedding_id, "vendor_id": vendor_id, **extra},
        )

    def test_owner_can_book_approved_vendor(self) -> None:
        response = self._book(self.ann, self.ann_wedding["id"], self.vendor_id, price=1500)

        self.assertEqual(response.status_code, 201)
        booking = response.json()
        self.assertEqual(booking["status"], "pending")
        self.assertEqual(booking["price"], 1500)
        self.assertEqual(booking["wedding"]["title"], "Ann & Adam")
        self.assertEqual(booking["vendor"]["business_name"], "Lensa Studio")

    def test_booking_someone_elses_wedding_is_forbidden(self) -> None:
        response = self._book(self.bob, self.ann_wedding["id"], self.vendor_id)

        self.assertEqual(response.status_code, 403)

    def test_missing_wedding_or_vendor_is_not_found(self) -> None:
        self.assertEqual(self._book(self.ann, 9999, self.vendor_id).status_code, 404)
        self.assertEqual(self._book(self.ann, self.ann_wedding["id"], 9999).status_code, 404)

    def test_out_of_range_ids_are_a_bad_request(self) -> None:
        response = self._book(self.ann, 99999999999999999999, self.vendor_id)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["details"]["fields"], ["wedding_id"])
        self.assertEqual(self._book(self.ann, self.ann_wedding["id"], 2**31).status_code, 400)

    def test_unapproved_vendor_cannot_be_booked(self) -> None:
        response = self._book(self.ann, self.ann_wedding["id"], self.unapproved_id)

        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["error"], "Vendor is not approved")

    def test_booking_requires_token(self) -> None:
        response = self.client.post(
            "/bookings", json={"wedding_id": self.ann_wedding["id"], "vendor_id": self.vendor_id}
        )

        self.assertEqual(response.status_code, 401)

    def test_my_weddings_and_bookings_are_owner_scoped(self) -> None:
        bob_wedding = self._wedding(self.bob, "Bob & Bea", None)
        self._book(self.ann, self.ann_wedding["id"], self.vendor_id)
        self._book(self.bob, bob_wedding["id"], self.vendor_id)

        ann_weddings = self.client.get("/weddings/my", headers=self.auth_headers(self.ann)).json()
        ann_bookings = self.client.get("/bookings/my", headers=self.auth_headers(self.ann)).json()
        bob_bookings = self.client.get("/bookings/my", headers=self.auth_headers(self.bob)).json()

        self.assertEqual([w["id"] for w in ann_weddings], [self.ann_wedding["id"]])
        self.assertEqual([b["wedding_id"] for b in ann_bookings], [self.ann_wedding["id"]])
        self.assertEqual([b["wedding_id"] for b in bob_bookings], [bob_wedding["id"]])

    def test_booked_wedding_summary_carries_status(self) -> None:
        self._book(self.ann, self.ann_wedding["id"], self.vendor_id)

        bookings = self.client.get("/bookings/my", headers=self.auth_headers(self.ann)).json()

        self.assertEqual(bookings[0]["wedding"]["status"], "planning")

    def test_upcoming_skips_past_weddings(self) -> None:
        past = self._wedding(self.ann, "Engagement", date.today() - timedelta(days=30))
        later = self._wedding(self.ann, "Reception", date.today() + timedelta(days=60))
        self._book(self.ann, past["id"], self.vendor_id)
        self._book(self.ann, later["id"], self.vendor_id)
        self._book(self.ann, self.ann_wedding["id"], self.vendor_id)

        response = self.client.get("/bookings/upcoming", headers=self.auth_headers(self.ann))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            [b["wedding_id"] for b in response.json()],
            [self.ann_wedding["id"], later["id"]],
        )


if __name__ == "__main__":
    unittest.main()
