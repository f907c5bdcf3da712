import json
import unittest

from TM1model.Exceptions import TM1modelDecodeException
from TM1model.Objects import BreakPointType, HitMode, ProcessDebugBreakpoint


class TestBreakPointType(unittest.TestCase):

    def test_BreakPointType_init(self):
        break_point_type = BreakPointType("ProcessDebugContextDataBreakpoint")
        self.assertEqual(BreakPointType.PROCESS_DEBUG_CONTEXT_DATA_BREAK_POINT, break_point_type)

    def test_BreakPointType_init_case(self):
        break_point_type = BreakPointType("ProcessDebugContextDataBREAKPOINT")
        self.assertEqual(BreakPointType.PROCESS_DEBUG_CONTEXT_DATA_BREAK_POINT, break_point_type)

    def test_BreakPointType_init_odata_type(self):
        break_point_type = BreakPointType("#ibm.tm1.api.v1.ProcessDebugContextLockBreakpoint")
        self.assertEqual(BreakPointType.PROCESS_DEBUG_CONTEXT_LOCK_BREAK_POINT, break_point_type)

    def test_BreakPointType_str(self):
        break_point_type = BreakPointType.PROCESS_DEBUG_CONTEXT_DATA_BREAK_POINT
        self.assertEqual("ProcessDebugContextDataBreakpoint", str(break_point_type))


class TestHitMode(unittest.TestCase):

    def test_HitMode_init(self):
        hit_mode = HitMode("BreakAlways")
        self.assertEqual(HitMode.BREAK_ALWAYS, hit_mode)

    def test_HitMode_init_case(self):
        hit_mode = HitMode("break greater or equal")
        self.assertEqual(HitMode.BREAK_GREATER_OR_EQUAL, hit_mode)

    def test_HitMode_str(self):
        hit_mode = HitMode.BREAK_ALWAYS
        self.assertEqual("BreakAlways", str(hit_mode))

    def test_HitMode_invalid(self):
        with self.assertRaises(ValueError):
            HitMode(3)


class TestProcessDebugBreakpoint(unittest.TestCase):

    def test_line_breakpoint_body(self):
        breakpoint = ProcessDebugBreakpoint(procedure_type="Prolog", line_number=12)

        self.assertEqual(
            {"@odata.type": "#ibm.tm1.api.v1.ProcessDebugContextLineBreakpoint",
             "Enabled": True,
             "HitMode": "BreakAlways",
             "ProcedureType": "Prolog",
             "LineNumber": 12},
            breakpoint.body_as_dict)

    def test_data_breakpoint_body(self):
        breakpoint = ProcessDebugBreakpoint(
            breakpoint_id=3,
            breakpoint_type="ProcessDebugContextDataBreakpoint",
            hit_mode="BreakEqual",
            expression="vValue > 10",
            variable_name="vValue")

        body = breakpoint.body_as_dict

        self.assertEqual(3, body["ID"])
        self.assertEqual("BreakEqual", body["HitMode"])
        self.assertEqual("vValue > 10", body["Expression"])
        self.assertEqual("vValue", body["VariableName"])
        self.assertNotIn("LineNumber", body)

    def test_lock_breakpoint_body(self):
        breakpoint = ProcessDebugBreakpoint(
            breakpoint_type=BreakPointType.PROCESS_DEBUG_CONTEXT_LOCK_BREAK_POINT,
            object_name="Sales",
            object_type="Cube",
            lock_mode="Exclusive")

        body = breakpoint.body_as_dict

        self.assertEqual("Sales", body["ObjectName"])
        self.assertEqual("Cube", body["ObjectType"])
        self.assertEqual("Exclusive", body["LockMode"])
        self.assertNotIn("ID", body)
        self.assertNotIn("Expression", body)

    def test_body_and_body_as_dict_equivalent(self):
        breakpoint = ProcessDebugBreakpoint(variable_name="v1", breakpoint_type="ProcessDebugContextDataBreakpoint")
        self.assertEqual(breakpoint.body_as_dict, json.loads(breakpoint.body))

    def test_from_dict(self):
        breakpoint = ProcessDebugBreakpoint.from_dict({
            "@odata.type": "#ibm.tm1.api.v1.ProcessDebugContextLineBreakpoint",
            "ID": 1,
            "Enabled": True,
            "HitMode": "BreakAlways",
            "HitCount": 4,
            "ProcedureType": "Data",
            "LineNumber": 7})

        self.assertEqual(1, breakpoint.breakpoint_id)
        self.assertEqual("ProcessDebugContextLineBreakpoint", breakpoint.breakpoint_type)
        self.assertEqual(4, breakpoint.hit_count)
        self.assertEqual("Data", breakpoint.procedure_type)
        self.assertEqual(7, breakpoint.line_number)

    def test_from_json_round_trip(self):
        breakpoint = ProcessDebugBreakpoint(breakpoint_id=2, procedure_type="Epilog", line_number=1)
        self.assertEqual(breakpoint, ProcessDebugBreakpoint.from_json(breakpoint.body))

    def test_from_dict_missing_type(self):
        with self.assertRaises(TM1modelDecodeException):
            ProcessDebugBreakpoint.from_dict({"ID": 1})

    def test_from_dict_invalid_hit_mode(self):
        with self.assertRaises(TM1modelDecodeException):
            ProcessDebugBreakpoint.from_dict({
                "@odata.type": "#ibm.tm1.api.v1.ProcessDebugContextLineBreakpoint",
                "HitMode": "Sometimes"})


if __name__ == '__main__':
    unittest.main()
