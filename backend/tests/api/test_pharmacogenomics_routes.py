"""
HTTP surface tests using FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient
from pgxrules.main import app

API = "/api/v1/pharmacogenomics"

RAW_EXPORT = (
    "# This data file generated by 23andMe\n"
    "# rsid\tchromosome\tposition\tgenotype\n"
    "rs9923231\t16\t31107689\tAA\n"
    "rs1799853\t10\t94942290\tCC\n"
    "rs1057910\t10\t94981296\tCC\n"
)


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert "CYP2D6" in body["genes"]


class TestAnalyze:

    def test_report(self, client):
        response = client.post(API + "/analyze", json={
            "genotypes": [{"variant_id": "rs4149056", "genotype": "C/T"}],
            "provider": "23andme",
        })

        assert response.status_code == 200
        report = response.json()
        assert report["provider"] == "23andme"
        assert report["results"]["SLCO1B1"]["diplotype"]["allele1"] == "*1"
        assert report["results"]["SLCO1B1"]["diplotype"]["allele2"] == "*5"
        assert report["metadata"]["version"] == "2.0.0"

    def test_genes_filter(self, client):
        response = client.post(API + "/analyze", json={"genotypes": [], "genes": ["F5"]})
        assert list(response.json()["results"]) == ["F5"]

    def test_unsupported_gene_is_404(self, client):
        response = client.post(API + "/analyze", json={"genotypes": [], "genes": ["BRCA1"]})
        assert response.status_code == 404
        assert "BRCA1" in response.json()["detail"]

    @pytest.mark.parametrize("genotype", [
        {"variant_id": "4149056", "genotype": "CT"},
        {"variant_id": "rs4149056", "genotype": "CTCTC"},
    ])
    def test_malformed_input_is_422(self, client, genotype):
        response = client.post(API + "/analyze", json={"genotypes": [genotype]})
        assert response.status_code == 422

    def test_single_gene(self, client):
        response = client.post(API + "/analyze/vkorc1", json={
            "genotypes": [{"variant_id": "rs9923231", "genotype": "AA"}],
        })

        assert response.status_code == 200
        body = response.json()
        assert body["gene"] == "VKORC1"
        assert body["phenotype"] == "High Sensitivity"
        assert body["combined_risk"]["combined_risk"] == "Moderate"

    def test_single_unsupported_gene_is_404(self, client):
        response = client.post(API + "/analyze/TPMT", json={"genotypes": []})
        assert response.status_code == 404


class TestAnalyzeFile:

    def test_raw_export(self, client):
        response = client.post(
            API + "/analyze-file",
            files={"file": ("genome.txt", RAW_EXPORT.encode("utf-8"), "text/plain")},
        )

        assert response.status_code == 200
        report = response.json()
        assert report["provider"] == "23andme"
        assert report["results"]["VKORC1"]["combined_risk"]["combined_risk"] == "Very High"

    def test_provider_form_field(self, client):
        response = client.post(
            API + "/analyze-file",
            files={"file": ("genome.txt", RAW_EXPORT.encode("utf-8"), "text/plain")},
            data={"provider": "ancestrydna"},
        )
        assert response.json()["provider"] == "ancestrydna"

    def test_unparseable_file_is_400(self, client):
        response = client.post(
            API + "/analyze-file",
            files={"file": ("notes.txt", b"# nothing here\n", "text/plain")},
        )
        assert response.status_code == 400


class TestGenes:

    def test_list(self, client):
        body = client.get(API + "/genes").json()

        assert [g["gene"] for g in body["genes"]] == [
            "UGT1A1", "SLCO1B1", "F5", "VKORC1", "CYP2C9", "CYP3A5", "CYP2D6"
        ]
        assert "23andme" in body["providers"]

    def test_one(self, client):
        body = client.get(API + "/genes/cyp2c9").json()
        assert body["defining_variants"] == ["rs1799853", "rs1057910"]
        assert body["drugs"]

    def test_unknown_is_404(self, client):
        assert client.get(API + "/genes/NAT2").status_code == 404
