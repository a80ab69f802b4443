"""Route tests through the FastAPI app."""

import httpx

from academy.api.routes import load_cadence_by_example_data


class TestPages:
    def test_home(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert "/en/catalog" in r.text

    def test_healthz(self, client):
        assert client.get("/healthz").json() == {"status": "ok"}

    def test_roadmap_page(self, client):
        r = client.get("/en/catalog/roadmaps/beginner-dapp-roadmap")
        assert r.status_code == 200
        assert "Beginner Dapp Roadmap" in r.text
        assert "Beginner Cadence Course" in r.text
        assert "This is the third chapter" in r.text
        assert 'href="/es/catalog/roadmaps/beginner-dapp-roadmap"' in r.text

    def test_translated_roadmap_page(self, client):
        r = client.get("/es/catalog/roadmaps/beginner-dapp-roadmap")
        assert r.status_code == 200
        assert "Ruta de Dapp para principiantes" in r.text

    def test_missing_roadmap_renders_not_found(self, client):
        r = client.get("/en/catalog/roadmaps/nonexistent-roadmap")
        assert r.status_code == 404
        assert "You missed it" in r.text

    def test_unsupported_language_does_not_match(self, client):
        r = client.get("/fr/catalog/roadmaps/beginner-dapp-roadmap")
        assert r.status_code == 404
        assert r.headers["content-type"].startswith("text/html")
        assert "Not Found" in r.text
        assert "You missed it" not in r.text

    def test_unknown_page_renders_error_page(self, client):
        r = client.get("/no/such/page")
        assert r.status_code == 404
        assert "<h1>Not Found</h1>" in r.text

    def test_roadmap_courses_are_not_dead_links(self, client):
        r = client.get("/en/catalog/roadmaps/beginner-dapp-roadmap")
        assert "/catalog/courses/" not in r.text

    def test_tutorial_page(self, client):
        r = client.get("/en/catalog/tutorials/hello-cadence")
        assert r.status_code == 200
        assert 'href="#calling-it-from-a-script"' in r.text
        assert 'class="language-cadence"' in r.text

    def test_catalog_page(self, client):
        r = client.get("/en/catalog")
        assert r.status_code == 200
        assert "/en/catalog/roadmaps/beginner-dapp-roadmap" in r.text
        assert "/en/catalog/tutorials/hello-cadence" in r.text


class TestCadenceByExamplePage:
    def test_renders_upstream_content(self, client, mock_upstream):
        mock_upstream(lambda request: httpx.Response(200, json=load_cadence_by_example_data()))

        r = client.get("/cadence-by-example")
        assert r.status_code == 200
        assert "Hello World" in r.text
        assert "access(all) resource Token" in r.text

    def test_upstream_failure_is_not_a_partial_page(self, client, mock_upstream):
        mock_upstream(lambda request: httpx.Response(503))

        r = client.get("/cadence-by-example")
        assert r.status_code == 502
        assert "Content could not be loaded" in r.text

    def test_malformed_upstream_json(self, client, mock_upstream):
        mock_upstream(lambda request: httpx.Response(200, content=b"<html>"))

        assert client.get("/cadence-by-example").status_code == 502


class TestApi:
    def test_cadence_by_example_endpoint(self, client):
        r = client.get("/api/content/cadenceByExample")
        assert r.status_code == 200
        body = r.json()
        assert [e["slug"] for e in body["examples"]] == ["hello-world", "resources", "scripts"]

    def test_catalog_endpoint(self, client):
        r = client.get("/api/catalog/en")
        assert r.status_code == 200
        assert {"title": "Beginner Dapp Roadmap", "slug": "beginner-dapp-roadmap", "contentType": "roadmap",
                "excerpt": "Lorem ipsum dolor sit amet.",
                "url": "/en/catalog/roadmaps/beginner-dapp-roadmap"} in r.json()

    def test_roadmap_endpoint_uses_camel_case(self, client):
        r = client.get("/api/content/en/roadmaps/beginner-dapp-roadmap")
        assert r.status_code == 200
        body = r.json()
        assert body["title"] == "Beginner Dapp Roadmap"
        assert body["contentType"] == "roadmap"
        assert body["metadata"]["prerequisites"] == ["javascript"]
        assert body["contents"][1]["url"] == "catalog/courses/basic-dapp"

    def test_roadmap_endpoint_not_found(self, client):
        r = client.get("/api/content/en/roadmaps/nonexistent-roadmap")
        assert r.status_code == 404
        assert r.json() == {"error": "You missed it"}

    def test_api_unsupported_language_stays_json(self, client):
        r = client.get("/api/catalog/fr")
        assert r.status_code == 404
        assert r.json() == {"detail": "Not Found"}
