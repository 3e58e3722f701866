from vplan.cli.app import main

main()
