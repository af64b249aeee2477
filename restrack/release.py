"""RESTRack project related information"""
version = "1.0.0"
description = "Resource oriented REST dispatch for WSGI"
long_description="""
RESTRack maps RESTful URLs onto resource controllers.

Each controller answers the eight resource actions derived from the HTTP
verb (index, show, create, update, replace, add, destroy, drop) and can
declare relationships to other resources, so that a path like
``/widgets/42/parts/3`` is resolved by walking from the widgets controller
to the parts controller.

 * identifiers coerced to the controller key type
 * single, indexed, validated, mapped and pass-through relationships
 * WebOb based WSGI application answering in JSON
"""
url="https://github.com/restrack/restrack"
author= "RESTRack contributors"
email = "restrack@googlegroups.com"
copyright = """Copyright 2010-2026 RESTRack contributors"""
license = "MIT"
