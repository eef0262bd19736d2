from namedyn.cli import main

main()
