"""
# AFP validator

AFP (Advanced Function Presentation) files, a.k.a. MO:DCA, are streams of
length-prefixed records called structured fields. Their type code tells
what the field is about and most of them come in Begin/End couples that
describe the hierarchy of the document:

    document
      resource group
      page group
        page
          object / overlay
        ...

Validating a file means three things done in a single pass:

 1. framing: split the bytes into structured fields, recovering from
    garbage by looking for the next introducer (streams.py, core.py,
    structured_field.py)
 2. classification: give each field its place in the hierarchy and the
    kind of content it carries (classifier.py)
 3. nesting: check that every End closes what the last Begin opened
    (nesting.py)

while counting what is found (statistics.py). The result is a
ValidationReport (report.py) built by validator.validate().

The content of the objects (text, images, fonts, ...) is never interpreted.
"""
