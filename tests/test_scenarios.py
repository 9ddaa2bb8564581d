"""End-to-end flows over the HTTP API."""

ADMIN_EMAIL = "admin@ponsectors.com"


def ids(response):
    assert response.status_code == 200, response.text
    return [item["id"] for item in response.json()]


def test_pending_project_reaches_portfolio_after_approval(client, sign_up, project_payload):
    owner = sign_up("Owner")
    other = sign_up("Other")
    admin = sign_up("Admin", email=ADMIN_EMAIL)

    created = client.post("/api/projects", headers=owner, json=project_payload(status="Pending"))
    assert created.status_code == 201, created.text
    project_id = created.json()["id"]
    assert created.json()["status"] == "Pending"

    assert project_id in ids(client.get("/api/projects/mine", headers=owner))
    assert project_id not in ids(client.get("/api/projects/portfolio", headers=other))
    assert client.get(f"/api/projects/{project_id}", headers=other).status_code == 404

    queue = client.get("/api/admin/queue", headers=admin).json()
    assert [(i["kind"], i["id"]) for i in queue] == [("project", project_id)]

    approved = client.post(f"/api/admin/project/{project_id}/approve", headers=admin)
    assert approved.status_code == 200
    assert approved.json()["changed"] is True

    assert project_id in ids(client.get("/api/projects/portfolio", headers=other))
    assert project_id in ids(client.get("/api/projects/portfolio", headers=owner))

    notes = client.get("/api/notifications", headers=owner).json()
    assert notes["unread_count"] == 1
    assert notes["items"][0]["type"] == "content_approved"


def test_join_request_then_invite_grants_edit(client, sign_up, project_payload):
    owner = sign_up("Owner")
    amir = sign_up("Amir")
    admin = sign_up("Admin", email=ADMIN_EMAIL)

    project_id = client.post("/api/projects", headers=owner, json=project_payload(status="Pending")).json()["id"]
    client.post(f"/api/admin/project/{project_id}/approve", headers=admin)

    # Non-members cannot edit yet
    assert client.patch(f"/api/projects/{project_id}", headers=amir, json={"city": "Gondar"}).status_code == 403

    joined = client.post(f"/api/projects/{project_id}/join-requests", headers=amir)
    assert joined.status_code == 200
    amir_id = client.get("/api/auth/me", headers=amir).json()["user"]["id"]
    assert joined.json()["project"]["join_requests"] == [amir_id]
    assert joined.json()["already_requested"] is False

    repeat = client.post(f"/api/projects/{project_id}/join-requests", headers=amir)
    assert repeat.json()["already_requested"] is True

    invited = client.post(
        f"/api/projects/{project_id}/collaborators", headers=owner, json={"email": "amir@example.com"}
    )
    assert invited.status_code == 200
    entry = [c for c in invited.json()["collaborators"] if c["user_id"] == amir_id][0]
    assert entry == {"user_id": amir_id, "role": "Collaborator", "status": "Active"}

    edited = client.patch(f"/api/projects/{project_id}", headers=amir, json={"city": "Gondar"})
    assert edited.status_code == 200
    assert edited.json()["city"] == "Gondar"

    again = client.post(
        f"/api/projects/{project_id}/collaborators", headers=owner, json={"email": "amir@example.com"}
    )
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "AlreadyCollaboratorException"


def test_role_upgrade_unlocks_funding(client, sign_up):
    member = sign_up("Member")
    admin = sign_up("Admin", email=ADMIN_EMAIL)
    grant = {
        "title": "Rural fintech grant",
        "description": "Support for financial inclusion startups",
        "deadline": "2030-06-30",
        "eligibility": "Registered startups",
        "status": "Pending",
    }

    blocked = client.post("/api/funding", headers=member, json=grant)
    assert blocked.status_code == 403
    assert blocked.json()["error"]["code"] == "ForbiddenException"

    member_id = client.get("/api/auth/me", headers=member).json()["user"]["id"]
    promoted = client.patch(f"/api/admin/users/{member_id}/role", headers=admin, json={"role": "Premium"})
    assert promoted.status_code == 200
    assert promoted.json()["role"] == "Premium"

    created = client.post("/api/funding", headers=member, json=grant)
    assert created.status_code == 201, created.text
    assert created.json()["status"] == "Pending"


def test_non_admin_cannot_use_admin_routes(client, sign_up):
    member = sign_up("Member")
    assert client.get("/api/admin/queue", headers=member).status_code == 403


def test_comment_thread_over_http(client, sign_up, project_payload):
    owner = sign_up("Owner")
    amir = sign_up("Amir")
    admin = sign_up("Admin", email=ADMIN_EMAIL)
    project_id = client.post("/api/projects", headers=owner, json=project_payload(status="Pending")).json()["id"]
    client.post(f"/api/admin/project/{project_id}/approve", headers=admin)

    first = client.post("/api/comments", headers=amir, json={"parent_id": project_id, "text": "Count me in"})
    assert first.status_code == 201
    reply = client.post(
        "/api/comments",
        headers=owner,
        json={"parent_id": project_id, "text": "Welcome", "reply_to_id": first.json()["id"]},
    )
    assert reply.status_code == 201

    tree = client.get("/api/comments/tree", headers=amir, params={"parent_id": project_id}).json()
    assert tree[0]["comment"]["text"] == "Count me in"
    assert tree[0]["replies"][0]["comment"]["text"] == "Welcome"

    assert client.delete(f"/api/comments/{first.json()['id']}", headers=owner).status_code == 204
    flat = client.get("/api/comments", headers=amir, params={"parent_id": project_id}).json()
    assert [c["text"] for c in flat] == ["Welcome"]


def test_bookmarks_over_http(client, sign_up, project_payload):
    owner = sign_up("Owner")
    admin = sign_up("Admin", email=ADMIN_EMAIL)
    project_id = client.post("/api/projects", headers=owner, json=project_payload(status="Pending")).json()["id"]
    client.post(f"/api/admin/project/{project_id}/approve", headers=admin)

    saved = client.post(f"/api/users/me/saved/{project_id}", headers=owner)
    assert saved.json()["saved_project_ids"] == [project_id]
    assert ids(client.get("/api/users/me/saved", headers=owner)) == [project_id]


def test_invalid_initial_status_is_rejected(client, sign_up, project_payload):
    owner = sign_up("Owner")
    response = client.post("/api/projects", headers=owner, json=project_payload(status="Shared"))
    assert response.status_code == 422


def test_unknown_country_is_rejected(client, sign_up, project_payload):
    owner = sign_up("Owner")
    response = client.post("/api/projects", headers=owner, json=project_payload(country="Atlantis"))
    assert response.status_code == 422
