"""Worked solutions to exercises on basics, errors, iterators, quizzes, baskets, smart pointers and traits."""