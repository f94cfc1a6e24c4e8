# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# SPDX-License-Identifier: MPL-2.0
from typing import Dict, Any, Type, Union


class OptionsProp:
    """
    Registered option property
    """

    def __init__(self, prop_name: str, tpe: Type[Union[int, float, bool, str]], definition: str = ""):
        """

        :param prop_name: name of the attribute
        :param tpe: type of the attribute
        :param definition: Definition of the property
        """
        self.name = prop_name

        self.tpe = tpe

        self.definition = definition

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.name


class OptionsTemplate:
    """
    Options template
    """

    def __init__(self, name: str):
        """

        :param name: name of the options set
        """
        self.name = name

        self.registered_properties: Dict[str, OptionsProp] = dict()

    def register(self, key: str, tpe: Type[Union[int, float, bool, str]], definition: str = ""):
        """
        Register property
        The property must exist
        :param key: name of the attribute
        :param tpe: type of the attribute
        :param definition: Definition of the property
        """
        assert (hasattr(self, key))  # the property must exist, this avoids bugs when registering

        if key in self.registered_properties.keys():
            raise Exception(f"Property {key} already registered!")

        self.registered_properties[key] = OptionsProp(prop_name=key, tpe=tpe, definition=definition)

    def to_dict(self) -> Dict[str, Any]:
        """
        Get a dictionary with the registered properties
        :return: Dict[property name, value]
        """
        return {key: getattr(self, key) for key in self.registered_properties.keys()}

    def parse_dict(self, data: Dict[str, Any]) -> None:
        """
        Set the registered properties from a dictionary, unknown keys are ignored
        :param data: Dict[property name, value]
        """
        for key, val in data.items():
            prop = self.registered_properties.get(key, None)
            if prop is not None:
                setattr(self, key, prop.tpe(val))
