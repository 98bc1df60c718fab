# makes the package importable from the tests without installing it
