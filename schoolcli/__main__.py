from schoolcli.main import main

main()
