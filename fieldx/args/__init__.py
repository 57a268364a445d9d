"""Parsing and validation of declarative attribute arguments."""