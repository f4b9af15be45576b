from dotnet_docgen.cli import main

main()
