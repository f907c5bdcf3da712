# -*- coding: utf-8 -*-

import collections
import re
from typing import Dict, Iterable, List, Optional, Union

from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import expect_dict, expect_list, load_json


class ProcessDataSource(TM1Object):
    """ Data source of a TI process.

        Only the keys that are relevant for the data source type are written to the body.
    """

    TYPES = ('None', 'ASCII', 'ODBC', 'TM1CubeView', 'TM1DimensionSubset', 'JSON')

    def __init__(self,
                 datasource_type: str = 'None',
                 ascii_decimal_separator: str = '.',
                 ascii_delimiter_char: str = ';',
                 ascii_delimiter_type: str = 'Character',
                 ascii_header_records: int = 1,
                 ascii_quote_character: str = '',
                 ascii_thousand_separator: str = ',',
                 data_source_name_for_client: str = '',
                 data_source_name_for_server: str = '',
                 password: str = '',
                 user_name: str = '',
                 query: str = '',
                 uses_unicode: bool = True,
                 view: str = '',
                 subset: str = '',
                 json_root_pointer: str = '',
                 json_variable_mapping: str = ''):
        self.datasource_type = datasource_type or 'None'
        self.ascii_decimal_separator = ascii_decimal_separator
        self.ascii_delimiter_char = ascii_delimiter_char
        self.ascii_delimiter_type = ascii_delimiter_type
        self.ascii_header_records = ascii_header_records
        self.ascii_quote_character = ascii_quote_character
        self.ascii_thousand_separator = ascii_thousand_separator
        self.data_source_name_for_client = data_source_name_for_client
        self.data_source_name_for_server = data_source_name_for_server
        self.password = password
        self.user_name = user_name
        self.query = query
        self.uses_unicode = uses_unicode
        self.view = view
        self.subset = subset
        self.json_root_pointer = json_root_pointer
        self.json_variable_mapping = json_variable_mapping

    @classmethod
    def from_dict(cls, datasource_as_dict: Optional[Dict]) -> 'ProcessDataSource':
        datasource_as_dict = expect_dict(datasource_as_dict or {}, "ProcessDataSource")
        return cls(
            datasource_type=datasource_as_dict.get('Type', 'None'),
            ascii_decimal_separator=datasource_as_dict.get('asciiDecimalSeparator', ''),
            ascii_delimiter_char=datasource_as_dict.get('asciiDelimiterChar', ''),
            ascii_delimiter_type=datasource_as_dict.get('asciiDelimiterType', ''),
            ascii_header_records=datasource_as_dict.get('asciiHeaderRecords', 0),
            ascii_quote_character=datasource_as_dict.get('asciiQuoteCharacter', ''),
            ascii_thousand_separator=datasource_as_dict.get('asciiThousandSeparator', ''),
            data_source_name_for_client=datasource_as_dict.get('dataSourceNameForClient', ''),
            data_source_name_for_server=datasource_as_dict.get('dataSourceNameForServer', ''),
            password=datasource_as_dict.get('password', ''),
            user_name=datasource_as_dict.get('userName', ''),
            query=datasource_as_dict.get('query', ''),
            uses_unicode=datasource_as_dict.get('usesUnicode', False),
            view=datasource_as_dict.get('view', ''),
            subset=datasource_as_dict.get('subset', ''),
            json_root_pointer=datasource_as_dict.get('jsonRootPointer', ''),
            json_variable_mapping=datasource_as_dict.get('jsonVariableMapping', ''))

    @property
    def body_as_dict(self) -> Dict:
        body_as_dict = collections.OrderedDict()
        body_as_dict['Type'] = self.datasource_type

        if self.datasource_type == 'ASCII':
            body_as_dict['asciiDecimalSeparator'] = self.ascii_decimal_separator
            if self.ascii_delimiter_type != 'FixedWidth':
                body_as_dict['asciiDelimiterChar'] = self.ascii_delimiter_char
            body_as_dict['asciiDelimiterType'] = self.ascii_delimiter_type
            body_as_dict['asciiHeaderRecords'] = self.ascii_header_records
            body_as_dict['asciiQuoteCharacter'] = self.ascii_quote_character
            body_as_dict['asciiThousandSeparator'] = self.ascii_thousand_separator
            body_as_dict['dataSourceNameForClient'] = self.data_source_name_for_client
            body_as_dict['dataSourceNameForServer'] = self.data_source_name_for_server
        elif self.datasource_type == 'ODBC':
            body_as_dict['dataSourceNameForClient'] = self.data_source_name_for_client
            body_as_dict['dataSourceNameForServer'] = self.data_source_name_for_server
            body_as_dict['userName'] = self.user_name
            body_as_dict['password'] = self.password
            body_as_dict['query'] = self.query
            body_as_dict['usesUnicode'] = self.uses_unicode
        elif self.datasource_type == 'TM1CubeView':
            # both keys carry the server name
            body_as_dict['dataSourceNameForClient'] = self.data_source_name_for_server
            body_as_dict['dataSourceNameForServer'] = self.data_source_name_for_server
            body_as_dict['view'] = self.view
        elif self.datasource_type == 'TM1DimensionSubset':
            body_as_dict['dataSourceNameForClient'] = self.data_source_name_for_server
            body_as_dict['dataSourceNameForServer'] = self.data_source_name_for_server
            body_as_dict['subset'] = self.subset
        elif self.datasource_type == 'JSON':
            body_as_dict['dataSourceNameForClient'] = self.data_source_name_for_client
            body_as_dict['dataSourceNameForServer'] = self.data_source_name_for_server
            body_as_dict['jsonRootPointer'] = self.json_root_pointer
            body_as_dict['jsonVariableMapping'] = self.json_variable_mapping
        return body_as_dict


class Process(TM1Object):
    """ Abstraction of a TM1 Process.

        IMPORTANT. doesn't work with Processes that were generated through the Wizard
    """

    """ the auto_generated_string code is required to be in all code-tabs. """
    BEGIN_GENERATED_STATEMENTS = "#****Begin: Generated Statements***"
    END_GENERATED_STATEMENTS = "#****End: Generated Statements****"
    AUTO_GENERATED_STATEMENTS = "{}\r\n{}\r\n".format(BEGIN_GENERATED_STATEMENTS, END_GENERATED_STATEMENTS)
    DEFAULT_UI_DATA = "CubeAction=1511\fDataAction=1503\fCubeLogChanges=0\f"

    @staticmethod
    def add_generated_string_to_code(code: str) -> str:
        pattern = r"(?s)#\*\*\*\*Begin: Generated Statements(.*)#\*\*\*\*End: Generated Statements\*\*\*\*"
        if re.search(pattern=pattern, string=code):
            return code
        return Process.AUTO_GENERATED_STATEMENTS + code

    def __init__(self,
                 name: str,
                 has_security_access: Optional[bool] = False,
                 ui_data: str = DEFAULT_UI_DATA,
                 parameters: Iterable[Dict] = None,
                 variables: Iterable[Dict] = None,
                 variables_ui_data: Iterable[str] = None,
                 prolog_procedure: str = '',
                 metadata_procedure: str = '',
                 data_procedure: str = '',
                 epilog_procedure: str = '',
                 datasource: ProcessDataSource = None,
                 attributes: Dict[str, str] = None):
        """ Default constructor

        :param name: name of the process - mandatory
        :param has_security_access:
        :param ui_data:
        :param parameters: list of dicts with Name, Prompt, Value and Type
        :param variables: list of dicts with Name, Type, Position, StartByte and EndByte
        :param variables_ui_data: one entry per variable
        :param prolog_procedure:
        :param metadata_procedure:
        :param data_procedure:
        :param epilog_procedure:
        :param datasource: instance of ProcessDataSource. Defaults to a data source of type 'None'
        :param attributes: process attributes, e.g. {'Caption': 'Load Sales'}
        """
        self._name = name
        self._has_security_access = has_security_access
        self._ui_data = ui_data
        self._parameters = [dict(parameter) for parameter in parameters] if parameters else []
        self._variables = [dict(variable) for variable in variables] if variables else []
        if variables_ui_data:
            # Handle encoding issue in variable_ui_data for async requests
            self._variables_ui_data = [entry.replace("â‚¬", "\f") for entry in variables_ui_data]
        else:
            self._variables_ui_data = []
        self._prolog_procedure = Process.add_generated_string_to_code(prolog_procedure)
        self._metadata_procedure = Process.add_generated_string_to_code(metadata_procedure)
        self._data_procedure = Process.add_generated_string_to_code(data_procedure)
        self._epilog_procedure = Process.add_generated_string_to_code(epilog_procedure)
        self._datasource = datasource if datasource is not None else ProcessDataSource()
        self._attributes = dict(attributes) if attributes else {}

    @classmethod
    def from_json(cls, process_as_json: str) -> 'Process':
        """
        :param process_as_json: response of /Processes('x')?$expand=*
        :return: an instance of this class
        """
        return cls.from_dict(load_json(process_as_json, "Process"))

    @classmethod
    def from_dict(cls, process_as_dict: Dict) -> 'Process':
        """
        :param process_as_dict: Dictionary, process as dictionary
        :return: an instance of this class
        """
        process_as_dict = expect_dict(process_as_dict, "Process")
        return cls(name=process_as_dict.get('Name') or '',
                   has_security_access=process_as_dict.get('HasSecurityAccess', False),
                   ui_data=process_as_dict.get('UIData', ''),
                   parameters=[expect_dict(parameter, "Process")
                               for parameter in expect_list(process_as_dict.get('Parameters'), "Process")],
                   variables=[expect_dict(variable, "Process")
                              for variable in expect_list(process_as_dict.get('Variables'), "Process")],
                   variables_ui_data=expect_list(process_as_dict.get('VariablesUIData'), "Process"),
                   prolog_procedure=process_as_dict.get('PrologProcedure') or '',
                   metadata_procedure=process_as_dict.get('MetadataProcedure') or '',
                   data_procedure=process_as_dict.get('DataProcedure') or '',
                   epilog_procedure=process_as_dict.get('EpilogProcedure') or '',
                   datasource=ProcessDataSource.from_dict(process_as_dict.get('DataSource')),
                   attributes=expect_dict(process_as_dict.get('Attributes') or {}, "Process"))

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value

    @property
    def has_security_access(self) -> bool:
        return self._has_security_access

    @has_security_access.setter
    def has_security_access(self, value: bool):
        self._has_security_access = value

    @property
    def ui_data(self) -> str:
        return self._ui_data

    @property
    def variables(self) -> List[Dict]:
        return self._variables

    @property
    def variables_ui_data(self) -> List[str]:
        return self._variables_ui_data

    @property
    def parameters(self) -> List[Dict]:
        return self._parameters

    @property
    def attributes(self) -> Dict[str, str]:
        return self._attributes

    @property
    def datasource(self) -> ProcessDataSource:
        return self._datasource

    @datasource.setter
    def datasource(self, value: ProcessDataSource):
        self._datasource = value

    @property
    def datasource_type(self) -> str:
        return self._datasource.datasource_type

    @property
    def prolog_procedure(self) -> str:
        return self._prolog_procedure

    @prolog_procedure.setter
    def prolog_procedure(self, value: str):
        self._prolog_procedure = Process.add_generated_string_to_code(value)

    @property
    def metadata_procedure(self) -> str:
        return self._metadata_procedure

    @metadata_procedure.setter
    def metadata_procedure(self, value: str):
        self._metadata_procedure = Process.add_generated_string_to_code(value)

    @property
    def data_procedure(self) -> str:
        return self._data_procedure

    @data_procedure.setter
    def data_procedure(self, value: str):
        self._data_procedure = Process.add_generated_string_to_code(value)

    @property
    def epilog_procedure(self) -> str:
        return self._epilog_procedure

    @epilog_procedure.setter
    def epilog_procedure(self, value: str):
        self._epilog_procedure = Process.add_generated_string_to_code(value)

    def add_variable(self, name: str, variable_type: str, position: int = None):
        """ add variable to the process

        :param name: -
        :param variable_type: 'String' or 'Numeric'
        :param position: position in the data source. Defaults to the next position
        :return:
        """
        # variable consists of actual variable and UI-Information ('ignore','other', etc.)
        variable = {'Name': name,
                    'Type': variable_type,
                    'Position': position if position is not None else len(self._variables) + 1,
                    'StartByte': 0,
                    'EndByte': 0}
        self._variables.append(variable)
        # VarType 33 -> Numeric, VarType 32 -> String, ColType 827 -> Other
        var_type = 33 if variable_type == 'Numeric' else 32
        self._variables_ui_data.append('VarType=' + str(var_type) + '\f' + 'ColType=' + str(827) + '\f')

    def remove_variable(self, name: str):
        for index, variable in enumerate(self._variables):
            if variable['Name'] == name:
                del self._variables[index]
                if index < len(self._variables_ui_data):
                    del self._variables_ui_data[index]
                return

    def add_parameter(self, name: str, prompt: str, value: Union[str, int, float],
                      parameter_type: Optional[str] = None):
        """

        :param name:
        :param prompt:
        :param value:
        :param parameter_type: introduced in TM1 11 REST API, therefor optional. if Not given type is derived from value
        :return:
        """
        if not parameter_type:
            parameter_type = 'String' if isinstance(value, str) else 'Numeric'
        parameter = {'Name': name,
                     'Prompt': prompt,
                     'Value': value,
                     'Type': parameter_type}
        self._parameters.append(parameter)

    def remove_parameter(self, name: str):
        for index, parameter in enumerate(self._parameters):
            if parameter['Name'] == name:
                del self._parameters[index]
                return

    def drop_parameter_types(self):
        for parameter in self._parameters:
            parameter.pop('Type', None)

    @property
    def body_as_dict(self) -> Dict:
        body_as_dict = collections.OrderedDict()
        body_as_dict['Name'] = self._name
        body_as_dict['PrologProcedure'] = self._prolog_procedure
        body_as_dict['MetadataProcedure'] = self._metadata_procedure
        body_as_dict['DataProcedure'] = self._data_procedure
        body_as_dict['EpilogProcedure'] = self._epilog_procedure
        body_as_dict['HasSecurityAccess'] = self._has_security_access
        body_as_dict['UIData'] = self._ui_data
        body_as_dict['DataSource'] = self._datasource.body_as_dict
        body_as_dict['Parameters'] = self._parameters
        body_as_dict['Variables'] = self._variables
        body_as_dict['VariablesUIData'] = self._variables_ui_data
        if self._attributes:
            body_as_dict['Attributes'] = self._attributes
        return body_as_dict
