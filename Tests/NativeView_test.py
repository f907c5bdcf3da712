import json
import unittest

from TM1model import NativeView, SelectedElement, Subset, ViewAxisSelection, ViewTitleSelection
from TM1model.Exceptions import TM1modelMissingBindingException


class TestNativeView(unittest.TestCase):

    def setUp(self):
        self.view = NativeView(cube_name="Sales", view_name="Regions by Month")
        self.view.add_column(Subset.dynamic(
            subset_name="All Regions",
            dimension_name="Region",
            hierarchy_name="Region",
            expression="{TM1SUBSETALL([Region].[Region])}"))
        self.view.add_title(
            Subset.static(subset_name="JanOnly", dimension_name="Time", hierarchy_name="Time", elements=["Jan"]),
            SelectedElement("Jan"))

    def test_body_static(self):
        body = self.view.construct_body_as_dict(static=True)

        self.assertEqual("#ibm.tm1.api.v1.NativeView", body["@odata.type"])
        self.assertEqual("Regions by Month", body["Name"])
        self.assertEqual("{TM1SUBSETALL([Region].[Region])}", body["Columns"][0]["Subset"]["Expression"])
        self.assertEqual(
            ["Dimensions('Time')/Hierarchies('Time')/Elements('Jan')"],
            body["Titles"][0]["Subset"]["Elements@odata.bind"])
        self.assertEqual(
            "Dimensions('Time')/Hierarchies('Time')/Elements('Jan')",
            body["Titles"][0]["Selected@odata.bind"])
        self.assertEqual([], body["Rows"])

    def test_body_not_static(self):
        body = self.view.construct_body_as_dict(static=False)

        self.assertNotIn("Elements@odata.bind", body["Titles"][0]["Subset"])
        self.assertEqual("JanOnly", body["Titles"][0]["Subset"]["Name"])
        self.assertIn("Selected@odata.bind", body["Titles"][0])

    def test_body_is_static_body(self):
        self.assertEqual(json.loads(self.view.construct_body(static=True)), json.loads(self.view.body))

    def test_body_omits_defaults(self):
        body = self.view.body_as_dict

        self.assertNotIn("SuppressEmptyColumns", body)
        self.assertNotIn("SuppressEmptyRows", body)
        self.assertNotIn("FormatString", body)

    def test_body_with_suppression_and_format_string(self):
        self.view.suppress_empty_cells = True
        self.view.format_string = "0.00"
        body = self.view.body_as_dict

        self.assertTrue(self.view.suppress_empty_cells)
        self.assertTrue(body["SuppressEmptyColumns"])
        self.assertTrue(body["SuppressEmptyRows"])
        self.assertEqual("0.00", body["FormatString"])

    def test_body_without_titles(self):
        self.view.remove_title("t i m e")
        self.assertNotIn("Titles", self.view.body_as_dict)

    def test_body_axis_without_subset(self):
        self.view.columns.append(ViewAxisSelection(subset=None, dimension_name="Product"))
        with self.assertRaises(TM1modelMissingBindingException) as error:
            _ = self.view.body
        self.assertEqual("subset", error.exception.field)

    def test_body_selected_element_with_own_hierarchy(self):
        self.view.titles[0].selected = SelectedElement("Feb", "Time", "Fiscal Time")
        self.assertEqual(
            "Dimensions('Time')/Hierarchies('Fiscal%20Time')/Elements('Feb')",
            self.view.body_as_dict["Titles"][0]["Selected@odata.bind"])

    def test_remove_column(self):
        self.view.add_column(Subset.static("", "Product", elements=["p1"]))
        self.view.remove_column("REGION")
        self.assertEqual(["Product"], [column.dimension_name for column in self.view.columns])

    def test_remove_column_keeps_axis_without_dimension(self):
        self.view.columns.append(ViewAxisSelection(subset=None))
        self.view.remove_column("Region")

        self.assertEqual(1, len(self.view.columns))
        self.assertIsNone(self.view.columns[0].subset)

    def test_add_title_stamps_selected_element(self):
        selected = self.view.titles[0].selected

        self.assertEqual("Time", selected.dimension_name)
        self.assertEqual("Time", selected.hierarchy_name)

    def test_title_with_element_name_binds_to_subset_hierarchy(self):
        title = ViewTitleSelection(Subset.static("", "Time", "Fiscal Time", elements=["Jan"]), "Jan")
        self.assertEqual(
            "Dimensions('Time')/Hierarchies('Fiscal%20Time')/Elements('Jan')",
            title.body_as_dict["Selected@odata.bind"])

    def test_title_selected_element_without_dimension(self):
        title = ViewTitleSelection(Subset.static("", "Time", elements=["Jan"]), SelectedElement("Jan"))
        with self.assertRaises(TM1modelMissingBindingException) as error:
            _ = title.body_as_dict
        self.assertEqual("dimension_name", error.exception.field)

    def test_add_and_remove_row(self):
        self.view.add_row(Subset.static("", "Product", elements=["p1"]))
        self.assertEqual("Product", self.view.rows[0].hierarchy_name)

        self.view.remove_row("product")
        self.assertEqual([], self.view.rows)

    def test_as_mdx_happy_case(self):
        native_view = NativeView(
            cube_name="c1",
            view_name="not_relevant",
            suppress_empty_columns=True,
            suppress_empty_rows=False,
            titles=[ViewTitleSelection(Subset.static("", "d3", elements=["e3"]), "e3")],
            columns=[ViewAxisSelection(Subset.dynamic("", "d1", expression="{[d1].[e1]}"))],
            rows=[ViewAxisSelection(Subset.dynamic("", "d2", expression="{[d2].[e2]}"))])

        self.assertEqual(
            "SELECT\r\n"
            "NON EMPTY {[d1].[e1]} DIMENSION PROPERTIES MEMBER_NAME ON 0,\r\n"
            "{[d2].[e2]} DIMENSION PROPERTIES MEMBER_NAME ON 1\r\n"
            "FROM [c1]\r\n"
            "WHERE ([d3].[d3].[e3])",
            native_view.mdx)

    def test_as_mdx_no_rows(self):
        native_view = NativeView(
            cube_name="c1",
            view_name="not_relevant",
            suppress_empty_columns=True,
            titles=[ViewTitleSelection(Subset.static("", "d3", elements=["e3"]), "e3")],
            columns=[ViewAxisSelection(Subset.dynamic("", "d1", expression="{[d1].[e1]}"))])

        self.assertEqual(
            "SELECT\r\n"
            "NON EMPTY {[d1].[e1]} DIMENSION PROPERTIES MEMBER_NAME ON 0\r\n"
            "FROM [c1]\r\n"
            "WHERE ([d3].[d3].[e3])",
            native_view.mdx)

    def test_as_mdx_no_titles(self):
        native_view = NativeView(
            cube_name="c1",
            view_name="not_relevant",
            suppress_empty_columns=True,
            columns=[ViewAxisSelection(Subset.dynamic("", "d1", expression="{[d1].[e1]}"))])

        self.assertEqual(
            "SELECT\r\n"
            "NON EMPTY {[d1].[e1]} DIMENSION PROPERTIES MEMBER_NAME ON 0\r\n"
            "FROM [c1]",
            native_view.mdx)

    def test_as_mdx_no_columns(self):
        native_view = NativeView(
            cube_name="c1",
            view_name="not_relevant",
            rows=[ViewAxisSelection(Subset.dynamic("", "d1", expression="{[d1].[e1]}"))])

        with self.assertRaises(ValueError):
            _ = native_view.mdx

    def test_as_mdx_registered_subsets(self):
        native_view = NativeView(
            cube_name="c1",
            view_name="not_relevant",
            suppress_empty_columns=True,
            titles=[ViewTitleSelection(Subset.static("s1", "d1", elements=["e1", "e2"]), "e1")],
            columns=[ViewAxisSelection(Subset.static("s2", "d2", elements=["e1", "e2"]))],
            rows=[ViewAxisSelection(Subset.static("s3", "d3", elements=["e1", "e2"]))])

        self.assertEqual(
            "SELECT\r\n"
            "NON EMPTY {TM1SUBSETTOSET([d2].[d2],\"s2\")} DIMENSION PROPERTIES MEMBER_NAME ON 0,\r\n"
            "{TM1SUBSETTOSET([d3].[d3],\"s3\")} DIMENSION PROPERTIES MEMBER_NAME ON 1\r\n"
            "FROM [c1]\r\n"
            "WHERE ([d1].[d1].[e1])",
            native_view.mdx)

    def test_from_dict_with_unregistered_subsets(self):
        view_json = json.dumps({
            "@odata.type": "#ibm.tm1.api.v1.NativeView",
            "Name": "Default",
            "Columns": [{"Subset": {
                "Hierarchy@odata.bind": "Dimensions('d2')/Hierarchies('d2')",
                "Expression": "{[d2].[e3],[d2].[e4]}"}}],
            "Rows": [{"Subset": {
                "Hierarchy@odata.bind": "Dimensions('d1')/Hierarchies('d1')",
                "Elements@odata.bind": [
                    "Dimensions('d1')/Hierarchies('d1')/Elements('e1')",
                    "Dimensions('d1')/Hierarchies('d1')/Elements('A%26B')"]}}],
            "Titles": [],
            "SuppressEmptyColumns": False,
            "SuppressEmptyRows": False,
            "FormatString": "0.#########"
        })

        view = NativeView.from_json(view_json, cube_name="c1")

        self.assertEqual("c1", view.cube)
        self.assertEqual("Default", view.name)
        self.assertFalse(view.suppress_empty_rows)
        self.assertEqual("0.#########", view.format_string)
        self.assertEqual("d2", view.columns[0].dimension_name)
        self.assertEqual("d2", view.columns[0].hierarchy_name)
        self.assertEqual("{[d2].[e3],[d2].[e4]}", view.columns[0].subset.expression)
        self.assertEqual("d1", view.rows[0].dimension_name)
        self.assertEqual(["e1", "A&B"], view.rows[0].subset.elements)

    def test_from_dict_with_registered_subset(self):
        view = NativeView.from_dict({
            "@odata.type": "#ibm.tm1.api.v1.NativeView",
            "Name": "Default",
            "Columns": [{"Subset@odata.bind": "Dimensions('d1')/Hierarchies('h1')/Subsets('Registered%20Subset')"}],
            "Rows": []})

        subset = view.columns[0].subset
        self.assertEqual("Registered Subset", subset.name)
        self.assertEqual("d1", subset.dimension_name)
        self.assertEqual("h1", subset.hierarchy_name)

    def test_from_dict_expanded_axes(self):
        view = NativeView.from_dict({
            "@odata.type": "#ibm.tm1.api.v1.NativeView",
            "Name": "v1",
            "Cube": {"Name": "c1"},
            "Columns": [{"Subset": {
                "Name": "s1",
                "Expression": "{[d1].[e1]}",
                "Hierarchy": {"Name": "d1", "Dimension": {"Name": "d1"}}}}],
            "Titles": [{
                "Subset": {
                    "Name": "",
                    "Hierarchy": {"Name": "h2", "Dimension": {"Name": "d2"}},
                    "Elements": [{"Name": "e2"}]},
                "Selected": {"Name": "e2", "Hierarchy": {"Name": "h2", "Dimension": {"Name": "d2"}}}}]})

        self.assertEqual("c1", view.cube)
        self.assertEqual("e2", view.titles[0].selected_name)
        self.assertEqual("h2", view.titles[0].selected.hierarchy_name)
        self.assertEqual(
            "Dimensions('d2')/Hierarchies('h2')/Elements('e2')",
            view.body_as_dict["Titles"][0]["Selected@odata.bind"])

    def test_from_dict_selected_without_hierarchy(self):
        view = NativeView.from_dict({
            "@odata.type": "#ibm.tm1.api.v1.NativeView",
            "Name": "v1",
            "Titles": [{
                "Subset": {"Name": "", "Hierarchy": {"Name": "d2", "Dimension": {"Name": "d2"}}},
                "Selected": {"Name": "e2"}}]})

        with self.assertRaises(TM1modelMissingBindingException):
            _ = view.body

    def test_from_dict_null_name(self):
        view = NativeView.from_dict({"@odata.type": "#ibm.tm1.api.v1.NativeView", "Name": None})
        self.assertEqual("", view.body_as_dict["Name"])

    def test_from_dict_without_cube(self):
        view = NativeView.from_dict({"@odata.type": "#ibm.tm1.api.v1.NativeView", "Name": "v1"})
        self.assertIsNone(view.cube)


if __name__ == '__main__':
    unittest.main()
