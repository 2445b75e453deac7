#!/usr/bin/env python3
"""Manual smoke test against a running dev server (ENV=dev, seeded directories)."""

import sys

import httpx


BASE_URL = "http://127.0.0.1:8000"
CUSTOMER = {"Authorization": "Bearer 2"}
OWNER = {"Authorization": "Bearer 1"}


def create_booking(start_time: str) -> str | None:
    print("=" * 60)
    print(f"POST /api/bookings start_time={start_time}")
    print("=" * 60)
    try:
        response = httpx.post(
            f"{BASE_URL}/api/bookings",
            params={"salon_id": "1"},
            json={"start_time": start_time, "service_ids": ["1", "2"]},
            headers=CUSTOMER,
            timeout=10.0,
        )
        response.raise_for_status()
        data = response.json()
        print(f"Created {data['id']} {data['start_time']} -> {data['end_time']} total={data['total_price']}")
        return data["id"]
    except httpx.HTTPStatusError as e:
        print(f"HTTP Error: {e.response.status_code} {e.response.text}")
        return None


def show_report() -> None:
    report = httpx.get(f"{BASE_URL}/api/bookings/report", headers=OWNER, timeout=10.0).json()
    earnings = httpx.get(f"{BASE_URL}/api/bookings/chart/earnings", headers=OWNER, timeout=10.0).json()
    print(f"Report: {report}")
    print(f"Earnings: {earnings}")


if __name__ == "__main__":
    day = sys.argv[1] if len(sys.argv) > 1 else "2030-05-06"
    booking_id = create_booking(f"{day}T10:00:00")
    create_booking(f"{day}T10:45:00")  # touches the first booking, expect 409
    if booking_id:
        httpx.post(
            f"{BASE_URL}/api/bookings/payments/success",
            json={"booking_id": booking_id, "payment_status": "SUCCESS"},
            timeout=10.0,
        )
    show_report()
