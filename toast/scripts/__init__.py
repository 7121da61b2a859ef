# toast command-line scripts: entry point, crash reporter, environment checks
