# services, работа с БД: журнал версий контента и коллекции-таблицы. Роутеры только вызывают их.
