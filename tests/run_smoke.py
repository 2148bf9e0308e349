"""End-to-end smoke run against a live order service.

    uvicorn main:app --port 8000
    python tests/run_smoke.py [base_url]

Not collected by pytest; exits non-zero if any scenario fails.
"""
import asyncio
import sys

import httpx
from termcolor import colored

# Configuration
ORDER_URL = "http://localhost:8000/api/v1/orders"


async def create_order(client, payload):
    return await client.post(ORDER_URL, json=payload)


async def scenario_create_and_fetch(client):
    resp = await create_order(client, {"customerId": "smoke-1", "productId": 100, "quantity": 2})
    if resp.status_code != 201:
        return False, f"create returned {resp.status_code}"
    created = resp.json()
    if created["status"] != "PENDING" or not created.get("createdAt"):
        return False, f"defaults not applied: {created}"

    fetched = await client.get(f"{ORDER_URL}/{created['id']}")
    if fetched.json() != created:
        return False, "fetched body differs from create response"
    return True, f"order {created['id']} created and fetched"


async def scenario_rejects_bad_quantity(client):
    resp = await create_order(client, {"customerId": "smoke-2", "productId": 100, "quantity": 0})
    if resp.status_code != 400:
        return False, f"expected 400, got {resp.status_code}"
    return True, resp.json().get("fieldErrors", {}).get("quantity", "")


async def scenario_status_transitions(client):
    created = (await create_order(client, {"customerId": "smoke-3", "productId": 7, "quantity": 1})).json()
    url = f"{ORDER_URL}/{created['id']}/status"

    confirmed = await client.patch(url, params={"status": "CONFIRMED"})
    if confirmed.status_code != 200 or confirmed.json()["status"] != "CONFIRMED":
        return False, f"confirm failed: {confirmed.status_code}"

    bad = await client.patch(url, params={"status": "SHIPPED"})
    missing = await client.patch(url)
    if (bad.status_code, missing.status_code) != (400, 400):
        return False, f"expected 400/400, got {bad.status_code}/{missing.status_code}"
    return True, "PENDING -> CONFIRMED, invalid and missing values rejected"


async def scenario_not_found(client):
    resp = await client.get(f"{ORDER_URL}/999999999")
    if resp.status_code != 404:
        return False, f"expected 404, got {resp.status_code}"
    return True, resp.json()["message"]


async def scenario_list_page(client):
    resp = await client.get(ORDER_URL, params={"page": 0, "size": 2})
    if resp.status_code != 200:
        return False, f"list returned {resp.status_code}"
    body = resp.json()
    if len(body["content"]) > 2:
        return False, "page larger than requested size"
    return True, f"{body['totalElements']} orders across {body['totalPages']} pages"


SCENARIOS = [
    scenario_create_and_fetch,
    scenario_rejects_bad_quantity,
    scenario_status_transitions,
    scenario_not_found,
    scenario_list_page,
]


async def main():
    failures = 0
    async with httpx.AsyncClient(timeout=10.0) as client:
        for scenario in SCENARIOS:
            name = scenario.__name__.removeprefix("scenario_")
            print(f"\n🧪 Testing: {colored(name, 'yellow')}")
            try:
                passed, reason = await scenario(client)
            except httpx.HTTPError as e:
                passed, reason = False, f"HTTP error: {e}"

            if passed:
                print(colored(f"   ✅ PASS: {reason}", "green"))
            else:
                failures += 1
                print(colored(f"   ❌ FAIL: {reason}", "red"))

    total = len(SCENARIOS)
    print(colored(f"\n{total - failures}/{total} scenarios passed", "cyan"))
    return failures


if __name__ == "__main__":
    if len(sys.argv) > 1:
        ORDER_URL = sys.argv[1].rstrip("/") + "/api/v1/orders"
    sys.exit(1 if asyncio.run(main()) else 0)
