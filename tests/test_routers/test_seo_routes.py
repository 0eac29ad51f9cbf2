from saltaire_guide.routers.seo import build_sitemap


async def test_sitemap(client):
    resp = await client.get("/sitemap.xml")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/xml")
    xml = resp.text
    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "<loc>https://saltaireguide.test/local-services</loc>" in xml
    assert "<loc>https://saltaireguide.test/local-services/pet-sitters</loc>" in xml
    assert xml.count("<priority>0.8</priority>") == 1
    assert xml.count("<priority>0.7</priority>") == 8


async def test_robots(client):
    resp = await client.get("/robots.txt")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == (
        "User-agent: *\n"
        "Allow: /\n"
        "Sitemap: https://saltaireguide.test/sitemap.xml\n"
        "Host: https://saltaireguide.test\n"
    )


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_build_sitemap_escapes_urls():
    xml = build_sitemap([("https://x.test/a?b=1&c=2", "0.5")], "2026-01-01")
    assert "<loc>https://x.test/a?b=1&amp;c=2</loc>" in xml
    assert "<lastmod>2026-01-01</lastmod>" in xml
