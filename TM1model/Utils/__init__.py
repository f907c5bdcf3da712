# ruff: noqa: F401
from TM1model.Utils.Utils import (
    CaseAndSpaceInsensitiveDict,
    CaseAndSpaceInsensitiveSet,
    build_url_friendly_object_name,
    case_and_space_insensitive_equals,
    dimension_name_from_unique_name,
    dimension_reference,
    dump_body,
    element_reference,
    expect_dict,
    expect_list,
    format_url,
    hierarchy_name_from_unique_name,
    hierarchy_reference,
    load_json,
    lower_and_drop_spaces,
    name_of,
    parse_odata_timestamp,
    read_object_name_from_url,
    subset_reference,
)
