"""Tests for the JSON-backed budget presets store."""

import json
import logging

import pytest

from services.presets import (
    PresetItem,
    adicionar_preset,
    atualizar_preset,
    carregar_presets,
    presets_iniciais,
    remover_preset,
    salvar_presets,
)


@pytest.fixture
def presets():
    """Two saved presets."""
    return [
        PresetItem(id="a", descricao="Diária", preco_unitario=1200.0),
        PresetItem(id="b", descricao="Drone", preco_unitario=800.0),
    ]


class TestCarregarPresets:
    """Tests for loading presets."""

    def test_bundled_defaults(self):
        iniciais = presets_iniciais()
        assert len(iniciais) == 5
        assert iniciais[0].id == "diaria-filmagem"

    def test_missing_file_uses_defaults(self, tmp_path):
        assert carregar_presets(tmp_path / "nao-existe.json") == presets_iniciais()

    def test_round_trip(self, tmp_path, presets):
        caminho = tmp_path / "dados" / "presets.json"
        salvar_presets(caminho, presets)
        assert carregar_presets(caminho) == presets
        assert not (tmp_path / "dados" / "presets.json.tmp").exists()

    def test_corrupt_file_falls_back(self, tmp_path, caplog):
        caminho = tmp_path / "presets.json"
        caminho.write_text("{nao e json", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert carregar_presets(caminho) == presets_iniciais()
        assert "Falha ao ler presets" in caplog.text

    def test_non_list_file_falls_back(self, tmp_path):
        caminho = tmp_path / "presets.json"
        caminho.write_text(json.dumps({"id": "x"}), encoding="utf-8")
        assert carregar_presets(caminho) == presets_iniciais()

    def test_invalid_entries_are_skipped(self, tmp_path):
        caminho = tmp_path / "presets.json"
        caminho.write_text(
            json.dumps([{"id": "x", "descricao": "Ok", "preco_unitario": 10}, {"descricao": ""}, "lixo"]),
            encoding="utf-8",
        )
        assert carregar_presets(caminho) == [PresetItem(id="x", descricao="Ok", preco_unitario=10.0)]


class TestEditarPresets:
    """Tests for add/update/remove."""

    def test_add(self, presets):
        novos = adicionar_preset(presets, "  Vinheta  ", "600,00")
        assert len(novos) == 3
        assert (novos[-1].descricao, novos[-1].preco_unitario) == ("Vinheta", 600.0)
        assert len(presets) == 2

    @pytest.mark.parametrize("descricao,preco", [("", 10), ("Ok", -1), ("Ok", "abc")])
    def test_add_invalid(self, presets, descricao, preco):
        with pytest.raises(ValueError):
            adicionar_preset(presets, descricao, preco)

    def test_update(self, presets):
        novos = atualizar_preset(presets, "b", "Drone 4K", 900)
        assert novos[1] == PresetItem(id="b", descricao="Drone 4K", preco_unitario=900.0)
        assert novos[0] == presets[0]

    def test_update_unknown(self, presets):
        with pytest.raises(ValueError, match="não encontrado"):
            atualizar_preset(presets, "zzz", "x", 1)

    def test_remove(self, presets):
        assert [p.id for p in remover_preset(presets, "a")] == ["b"]
        assert remover_preset(presets, "zzz") == presets
