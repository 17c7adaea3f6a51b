from measures_converter.cli import main

main()
