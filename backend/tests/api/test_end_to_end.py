"""End to End — two users, one book: the full ownership lifecycle.

Invariants:
    - A signs up, creates a book (201), B cannot change it (403),
      A deletes it (204), and it is gone for everyone (404)
    - No step needs server-side session state: credentials travel on each request
"""

from scholarlog.core.domain_types import ResourceKind


async def test_book_ownership_lifecycle(client, user_payload, auth, resource_payload):
    assert (await client.post("/api/users", json=user_payload("a@x.com"))).status_code == 201
    assert (await client.post(
        "/api/users", json=user_payload("b@x.com", firstName="Charles"),
    )).status_code == 201

    created = await client.post(
        "/api/books", json=resource_payload(ResourceKind.BOOK), headers=auth("a@x.com"),
    )
    assert created.status_code == 201
    location = created.headers["Location"]

    listed = (await client.get("/api/books")).json()
    assert len(listed) == 1
    assert listed[0]["User"]["emailAddress"] == "a@x.com"

    hijack = await client.put(location, json={"title": "Mine now"}, headers=auth("b@x.com"))
    assert hijack.status_code == 403
    assert (await client.get(location)).json()["title"] == "Analytical Engines"

    removed = await client.delete(location, headers=auth("a@x.com"))
    assert removed.status_code == 204

    gone = await client.get(location)
    assert gone.status_code == 404
    assert gone.json()["error"]["message"] == "Book Not Found"
