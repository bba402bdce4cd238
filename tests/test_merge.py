"""Test merging structure-derived and result-derived columns."""
from sqlpaste.parser.builder import merge_column_sets
from sqlpaste.parser.models import ColumnDescriptor, SqlType


def col(name, sql_type=SqlType.VARCHAR, **kwargs):
    return ColumnDescriptor(name=name, type=sql_type, **kwargs)


class TestMergeColumnSets:

    def test_varchar_upgraded(self):
        merged = merge_column_sets([col("X", SqlType.VARCHAR)], [col("X", SqlType.INT)])
        assert [(c.name, c.type) for c in merged] == [("X", SqlType.INT)]

    def test_specific_type_never_downgraded(self):
        merged = merge_column_sets([col("X", SqlType.DATE)], [col("X", SqlType.VARCHAR)])
        assert [(c.name, c.type) for c in merged] == [("X", SqlType.DATE)]

    def test_specific_type_not_replaced_by_other_specific(self):
        merged = merge_column_sets([col("X", SqlType.DECIMAL)], [col("X", SqlType.INT)])
        assert merged[0].type == SqlType.DECIMAL

    def test_string_types_compare_like_members(self):
        merged = merge_column_sets([col("X", "VARCHAR")], [col("X", "INT")])
        assert merged[0].type == "INT"

    def test_match_is_case_insensitive(self):
        merged = merge_column_sets([col("Programa_Id")], [col("PROGRAMA_ID", SqlType.INT)])
        assert len(merged) == 1
        assert merged[0].name == "Programa_Id"
        assert merged[0].type == SqlType.INT

    def test_structure_details_kept(self):
        structure = [col("FECHA_CORTE", length="20", nullable=True, description="Fecha Corte")]
        result = [col("FECHA_CORTE", SqlType.DATE, description="other")]

        merged = merge_column_sets(structure, result)[0]
        assert merged.type == SqlType.DATE
        assert merged.length == "20"
        assert merged.nullable is True
        assert merged.description == "Fecha Corte"

    def test_result_only_columns_appended_in_order(self):
        structure = [col("A"), col("B")]
        result = [col("Z", SqlType.INT), col("b", SqlType.BIT), col("Y", SqlType.DATE)]

        merged = merge_column_sets(structure, result)
        assert [c.name for c in merged] == ["A", "B", "Z", "Y"]
        assert merged[1].type == SqlType.BIT

    def test_empty_structure_returns_results(self):
        result = [col("A", SqlType.INT)]
        assert merge_column_sets([], result) == result

    def test_empty_results_returns_structure(self):
        structure = [col("A", SqlType.DATE)]
        assert merge_column_sets(structure, []) == structure

    def test_inputs_not_mutated(self):
        structure = [col("X")]
        result = [col("X", SqlType.INT)]

        merge_column_sets(structure, result)
        assert structure[0].type == SqlType.VARCHAR
