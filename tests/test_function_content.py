import pytest


def test_unknown_action_is_rejected(api):
    r = api("get", "get-everything")
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid action"}


def test_missing_action_is_rejected(api):
    r = api("get")
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid action"}


@pytest.mark.parametrize("method, action", [
    ("get", "create-hero"),
    ("post", "get-hero"),
    ("put", "create-testimonial"),
    ("delete", "update-product"),
])
def test_action_must_belong_to_the_verb(api, method, action):
    r = api(method, action, id="abc", json={"title": "x"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid action"}


@pytest.mark.parametrize("method, action", [
    ("put", "update-hero"),
    ("delete", "delete-hero"),
    ("put", "no-such-action"),
])
def test_update_and_delete_require_id(api, method, action):
    r = api(method, action, json={"title": "x"})
    assert r.status_code == 400
    assert r.json() == {"error": "ID is required"}


def test_hero_lifecycle(api):
    r = api("post", "create-hero", json={
        "title": "Build faster",
        "subtitle": "Nexus platform",
        "buttonText": "Get started",
        "buttonLink": "/products",
    })
    assert r.status_code == 200
    hero = r.json()
    assert hero["title"] == "Build faster"
    assert hero["buttonText"] == "Get started"
    assert hero["isActive"] is True
    assert hero["id"]

    r = api("put", "update-hero", id=hero["id"], json={"subtitle": "Now with AI"})
    updated = r.json()
    assert updated["subtitle"] == "Now with AI"
    assert updated["title"] == "Build faster"
    assert updated["buttonLink"] == "/products"

    r = api("delete", "delete-hero", id=hero["id"])
    assert r.json() == {"message": "Hero section deleted"}
    assert api("get", "get-hero").json() == []


def test_hero_list_is_most_recently_updated_first(api):
    first = api("post", "create-hero", json={"title": "First"}).json()
    api("post", "create-hero", json={"title": "Second"})
    api("put", "update-hero", id=first["id"], json={"isActive": False})

    titles = [h["title"] for h in api("get", "get-hero").json()]
    assert titles == ["First", "Second"]


def test_hero_requires_title(api):
    r = api("post", "create-hero", json={"subtitle": "no title"})
    assert r.status_code == 400
    assert r.json() == {"error": "title is required"}


def test_post_without_body_is_a_validation_error(api):
    r = api("post", "create-hero")
    assert r.status_code == 400
    assert r.json() == {"error": "title is required"}


def test_testimonial_defaults(api):
    r = api("post", "create-testimonial", json={"name": "Ana", "content": "Great support"})
    assert r.status_code == 200
    testimonial = r.json()
    assert testimonial["rating"] == 5
    assert testimonial["isActive"] is True
    assert testimonial["order"] == 0


def test_testimonial_null_fields_take_defaults(api):
    r = api("post", "create-testimonial", json={
        "name": "Ada", "content": "Great!", "rating": None, "isActive": None, "order": None,
    })
    assert r.status_code == 200
    testimonial = r.json()
    assert testimonial["rating"] == 5
    assert testimonial["isActive"] is True
    assert testimonial["order"] == 0


@pytest.mark.parametrize("action, payload", [
    ("create-hero", {"title": "Hi", "isActive": None}),
    ("create-why-choose-us", {"title": "Fast", "description": "Quick", "isActive": None, "order": None}),
    ("create-book-demo", {"title": "Book", "isActive": None}),
])
def test_section_null_fields_take_defaults(api, action, payload):
    r = api("post", action, json=payload)
    assert r.status_code == 200
    assert r.json()["isActive"] is True


def test_testimonial_rating_is_bounded(api):
    r = api("post", "create-testimonial", json={"name": "Ana", "content": "Meh", "rating": 6})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid value for rating"}


def test_testimonials_sorted_by_order(api):
    for name, order in (("C", 3), ("A", 1), ("B", 2)):
        api("post", "create-testimonial", json={"name": name, "content": "ok", "order": order})

    names = [t["name"] for t in api("get", "get-testimonials").json()]
    assert names == ["A", "B", "C"]


def test_delete_testimonial_then_get_returns_null(api):
    created = api("post", "create-testimonial", json={"name": "Bo", "content": "Nice"}).json()

    r = api("delete", "delete-testimonial", id=created["id"])
    assert r.json() == {"message": "Testimonial deleted"}

    r = api("get", "get-testimonials", id=created["id"])
    assert r.status_code == 200
    assert r.json() is None


def test_why_choose_us_crud(api):
    item = api("post", "create-why-choose-us", json={
        "title": "Fast", "description": "Deploys in minutes", "icon": "zap", "order": 2,
    }).json()
    api("post", "create-why-choose-us", json={"title": "Secure", "description": "SOC2", "order": 1})

    assert [i["title"] for i in api("get", "get-why-choose-us").json()] == ["Secure", "Fast"]

    updated = api("put", "update-why-choose-us", id=item["id"], json={"icon": "rocket"}).json()
    assert updated["icon"] == "rocket"
    assert updated["description"] == "Deploys in minutes"

    r = api("delete", "delete-why-choose-us", id=item["id"])
    assert r.json() == {"message": "Why Choose Us item deleted"}


def test_why_choose_us_requires_description(api):
    r = api("post", "create-why-choose-us", json={"title": "Fast"})
    assert r.status_code == 400
    assert r.json() == {"error": "description is required"}


def test_book_demo_section(api):
    section = api("post", "create-book-demo", json={
        "title": "Book a demo",
        "formFields": {"company": {"required": True}},
    }).json()
    assert section["formFields"] == {"company": {"required": True}}
    assert section["isActive"] is True

    plain = api("post", "create-book-demo", json={"title": "Plain", "formFields": None}).json()
    assert plain["formFields"] == {}

    updated = api("put", "update-book-demo", id=section["id"], json={"buttonText": "Schedule"}).json()
    assert updated["buttonText"] == "Schedule"
    assert updated["formFields"] == {"company": {"required": True}}

    # Most recently updated first
    assert [s["title"] for s in api("get", "get-book-demo").json()] == ["Book a demo", "Plain"]

    r = api("delete", "delete-book-demo", id=section["id"])
    assert r.json() == {"message": "Book Demo section deleted"}


@pytest.mark.parametrize("action, label", [
    ("update-hero", "Hero section"),
    ("update-testimonial", "Testimonial"),
    ("update-why-choose-us", "Why Choose Us item"),
    ("update-setting", "Setting"),
])
def test_update_unknown_id_is_404(api, action, label):
    r = api("put", action, id="missing", json={})
    assert r.status_code == 404
    assert r.json() == {"error": f"{label} not found"}


@pytest.mark.parametrize("action, label", [
    ("delete-hero", "Hero section"),
    ("delete-product", "Product"),
    ("delete-book-demo", "Book Demo section"),
    ("delete-demo-request", "Demo request"),
])
def test_delete_unknown_id_is_404(api, action, label):
    r = api("delete", action, id="missing")
    assert r.status_code == 404
    assert r.json() == {"error": f"{label} not found"}


def test_settings_upsert_by_key(api):
    first = api("post", "create-setting", json={"key": "site_name", "value": "Nexus"}).json()
    second = api("post", "create-setting", json={
        "key": "site_name", "value": "Nexus Inc", "description": "Shown in the footer",
    }).json()

    assert second["id"] == first["id"]
    assert second["value"] == "Nexus Inc"
    assert second["description"] == "Shown in the footer"
    assert len(api("get", "get-settings").json()) == 1


def test_settings_lookup_and_sorting(api):
    api("post", "create-setting", json={"key": "theme", "value": "dark"})
    api("post", "create-setting", json={"key": "contact_email", "value": "hi@nexus.com"})

    assert [s["key"] for s in api("get", "get-settings").json()] == ["contact_email", "theme"]
    assert api("get", "get-settings", key="theme").json()["value"] == "dark"
    assert api("get", "get-settings", key="missing").json() is None


def test_setting_update_and_delete(api):
    setting = api("post", "create-setting", json={"key": "theme", "value": "dark"}).json()

    updated = api("put", "update-setting", id=setting["id"], json={"value": "light"}).json()
    assert updated["value"] == "light"
    assert updated["key"] == "theme"

    r = api("delete", "delete-setting", id=setting["id"])
    assert r.json() == {"message": "Setting deleted"}
    assert api("get", "get-settings").json() == []


def test_setting_requires_key_and_value(api):
    r = api("post", "create-setting", json={"value": "x"})
    assert r.status_code == 400
    assert r.json() == {"error": "key is required"}

    r = api("post", "create-setting", json={"key": "x"})
    assert r.json() == {"error": "value is required"}
