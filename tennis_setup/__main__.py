from tennis_setup.runners.docker_setup import main

main()
