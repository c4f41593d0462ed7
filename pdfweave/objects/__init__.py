"""The PDF object model: object numbering, scalars, arrays, dictionaries and streams."""