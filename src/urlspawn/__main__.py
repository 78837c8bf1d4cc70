from urlspawn import main

main()
